import dash_bootstrap_components as dbc
from dash import no_update

from shop_dashboard import data_state as ds
from shop_dashboard.callbacks.label_cb import label_toast
from shop_dashboard.callbacks.tabs_cb import TAB_IDS, next_active_tab, render_panels, session_tabs
from shop_dashboard.pages.orders import label_button_id
from shop_dashboard.tab_state import TabSet


def click(tab_id):
    return {"type": "tab-trigger", "index": tab_id}


# ── tab switching ────────────────────────────────────────────────────────────

def test_click_selects_tab():
    assert next_active_tab({"active": "orders"}, click("inventory"), 1) == {"active": "inventory"}


def test_click_on_active_tab_is_no_update():
    assert next_active_tab({"active": "returns"}, click("returns"), 3) is no_update


def test_initial_fire_is_ignored():
    assert next_active_tab({"active": "orders"}, click("inventory"), 0) is no_update
    assert next_active_tab({"active": "orders"}, None, 1) is no_update


def test_empty_store_starts_from_default_tab():
    assert session_tabs(None).active_id == "orders"
    assert next_active_tab(None, click("orders"), 1) is no_update
    assert next_active_tab(None, click("analytics"), 1) == {"active": "analytics"}


def test_only_active_panel_renders():
    panels = render_panels(TabSet("inventory", TAB_IDS))
    assert len(panels) == len(TAB_IDS)
    assert [p is not None for p in panels] == [False, True, False, False]
    assert panels[1].id == "tab-panel-inventory"


def test_unknown_tab_renders_nothing():
    assert render_panels(TabSet("shipping", TAB_IDS)) == [None] * len(TAB_IDS)


def test_orders_panel_has_label_button_per_order(walk):
    panel = render_panels(TabSet("orders", TAB_IDS))[0]
    ids = [c.id for c in walk(panel) if getattr(c, "id", None) and isinstance(c.id, dict)]
    assert ids == [label_button_id(o["id"]) for o in ds.ORDERS]


def test_analytics_panel_has_both_charts(walk):
    panel = render_panels(TabSet("analytics", TAB_IDS))[3]
    graphs = [c for c in walk(panel) if type(c).__name__ == "Graph"]
    assert len(graphs) == 2


# ── shipping labels ──────────────────────────────────────────────────────────

def test_label_toast_for_clicked_order():
    toast = label_toast(label_button_id("1001"), 1)
    assert isinstance(toast, dbc.Toast)
    assert toast.children == "Shipping label for 1001"


def test_label_toast_ignores_initial_fire():
    assert label_toast(label_button_id("1001"), 0) is no_update
    assert label_toast(None, None) is no_update
