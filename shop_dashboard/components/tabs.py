"""Tab group builders — trigger row and content panels.

Both take their active/inactive state from the owning TabSet rather than
reading it themselves; the tabs callback passes it in on every change.
"""
from dash import html
from shop_dashboard.theme import *


def trigger_id(tab_id):
    return {"type": "tab-trigger", "index": tab_id}


def trigger_class(active):
    return TAB_ACTIVE_CLASS if active else TAB_INACTIVE_CLASS


def tab_trigger(tab_id, label, active=False):
    """Button that selects tab_id; styled as selected when active."""
    return html.Button(label, id=trigger_id(tab_id), n_clicks=0,
                       className=trigger_class(active))


def tab_list(tabs, tab_set):
    """Row of triggers for [(tab_id, label), ...]."""
    return html.Div(
        [tab_trigger(tab_id, label, tab_set.is_active(tab_id)) for tab_id, label in tabs],
        className="tab-list",
    )


def tab_panel(tab_id, children, active):
    """Panel content when active, nothing otherwise."""
    if not active:
        return None
    return html.Div(children, id=f"tab-panel-{tab_id}", className="tab-panel")
