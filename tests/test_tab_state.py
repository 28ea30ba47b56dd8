from shop_dashboard.tab_state import TabSet

TAB_IDS = ("orders", "inventory", "returns", "analytics")


def test_initial_tab_is_active():
    tabs = TabSet("orders", TAB_IDS)
    assert tabs.active_id == "orders"
    assert tabs.is_active("orders")
    assert not tabs.is_active("inventory")


def test_select_switches_active_tab():
    tabs = TabSet("orders", TAB_IDS)
    tabs.select("inventory")
    assert tabs.is_active("inventory")
    assert not tabs.is_active("orders")
    assert [t for t in TAB_IDS if tabs.is_active(t)] == ["inventory"]


def test_reselect_is_idempotent():
    once = TabSet("inventory", TAB_IDS)
    once.select("orders")
    twice = TabSet("inventory", TAB_IDS)
    twice.select("orders")
    twice.select("orders")
    assert once.to_store() == twice.to_store()
    assert twice.is_active("orders")


def test_unknown_tab_leaves_no_tab_active():
    tabs = TabSet("orders", TAB_IDS)
    tabs.select("shipping")
    assert tabs.active_id == "shipping"
    assert not any(tabs.is_active(t) for t in TAB_IDS)


def test_subscribers_notified_only_on_change():
    tabs = TabSet("orders", TAB_IDS)
    seen = []
    tabs.subscribe(seen.append)
    tabs.select("returns")
    tabs.select("returns")
    tabs.select("orders")
    assert seen == ["returns", "orders"]


def test_unsubscribe_stops_notifications():
    tabs = TabSet("orders")
    seen = []
    unsubscribe = tabs.subscribe(seen.append)
    unsubscribe()
    unsubscribe()
    tabs.select("returns")
    assert seen == []


def test_store_round_trip():
    tabs = TabSet("orders", TAB_IDS)
    tabs.select("analytics")
    restored = TabSet.from_store(tabs.to_store(), "orders", TAB_IDS)
    assert restored.is_active("analytics")
    assert restored.tab_ids == TAB_IDS


def test_from_empty_store_uses_default():
    assert TabSet.from_store(None, "orders").active_id == "orders"
    assert TabSet.from_store({}, "returns").active_id == "returns"
