"""Tab switching callbacks — trigger clicks update the session's TabSet."""
from dash import Input, Output, State, ALL, ctx, no_update

from shop_dashboard.config import get_settings
from shop_dashboard.tab_state import TabSet
from shop_dashboard.components.tabs import tab_panel, trigger_class

TABS = [
    ("orders", "Orders"),
    ("inventory", "Inventory"),
    ("returns", "Returns"),
    ("analytics", "Analytics"),
]
TAB_IDS = tuple(tab_id for tab_id, _ in TABS)


def _page_layout(tab_id):
    if tab_id == "orders":
        from shop_dashboard.pages.orders import layout
    elif tab_id == "inventory":
        from shop_dashboard.pages.inventory import layout
    elif tab_id == "returns":
        from shop_dashboard.pages.returns import layout
    elif tab_id == "analytics":
        from shop_dashboard.pages.analytics import layout
    else:
        return None
    return layout()


def session_tabs(store_data):
    """The session's TabSet, rebuilt from its dcc.Store data."""
    return TabSet.from_store(store_data, get_settings().default_tab, TAB_IDS)


def next_active_tab(store_data, triggered_id, n_clicks=None):
    """New store data after a trigger click, or no_update.

    Pattern-matching inputs also fire when the triggers are first rendered
    (n_clicks 0), which must not count as a selection. Clicking the tab that
    is already active changes nothing, so the panels are not re-rendered.
    """
    if not isinstance(triggered_id, dict) or not n_clicks:
        return no_update
    tabs = session_tabs(store_data)
    changed = []
    tabs.subscribe(changed.append)
    tabs.select(triggered_id["index"])
    if not changed:
        return no_update
    return tabs.to_store()


def render_panels(tabs):
    """One entry per known tab: the active panel's content, None for the rest."""
    panels = []
    for tab_id in TAB_IDS:
        active = tabs.is_active(tab_id)
        panels.append(tab_panel(tab_id, _page_layout(tab_id) if active else None, active))
    return panels


def register_callbacks(app):
    @app.callback(
        Output("active-tab", "data"),
        Input({"type": "tab-trigger", "index": ALL}, "n_clicks"),
        State("active-tab", "data"),
        prevent_initial_call=True,
    )
    def select_tab(n_clicks, store_data):
        n = ctx.triggered[0]["value"] if ctx.triggered else None
        return next_active_tab(store_data, ctx.triggered_id, n)

    @app.callback(
        Output({"type": "tab-trigger", "index": ALL}, "className"),
        Output("tab-body", "children"),
        Input("active-tab", "data"),
    )
    def show_tab(store_data):
        tabs = session_tabs(store_data)
        classes = [trigger_class(tabs.is_active(tab_id)) for tab_id in TAB_IDS]
        return classes, render_panels(tabs)
