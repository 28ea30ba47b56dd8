from shop_dashboard import data_state as ds


def test_initial_load_uses_sample_data():
    assert len(ds.ORDERS) == 4
    assert ds.ANALYTICS["order_volume"] == 4
    assert ds.ANALYTICS["return_rate"] == 50.0


def test_reload_replaces_collections(restore_data, sample_orders):
    def loader():
        return {"ORDERS": sample_orders, "INVENTORY": [], "RETURNS": [{"id": "R-1"}]}

    result = ds.reload(loader)
    assert result == {"orders": 3, "inventory": 0, "returns": 1, "return_rate": 33.3}
    assert ds.ORDERS is sample_orders
    assert ds.ANALYTICS == {"order_volume": 3, "fulfillment_time": 4.0, "return_rate": 33.3}


def test_formatters():
    assert ds.fmt_hours(4) == "4.0"
    assert ds.fmt_hours(14.0) == "14.0"
    assert ds.fmt_pct(12.5) == "12.5%"
    assert ds.fmt_pct(0) == "0%"
