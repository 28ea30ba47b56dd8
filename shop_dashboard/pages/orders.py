"""Orders tab — order table with a shipping-label button per row."""
from dash import html
import dash_bootstrap_components as dbc

from shop_dashboard.components.cards import empty_note
from shop_dashboard.components.tables import section_table, status_badge
from shop_dashboard import data_state as ds

HEADERS = ["ID", "Customer", "Status", "Label"]


def label_button_id(order_id):
    return {"type": "label-btn", "index": order_id}


def _label_button(order_id):
    return dbc.Button("Generate", id=label_button_id(order_id), n_clicks=0,
                      color="primary", size="sm")


def layout():
    if not ds.ORDERS:
        return empty_note("No orders yet.")
    rows = [
        [o["id"], o["customer"], status_badge(o["status"]), _label_button(o["id"])]
        for o in ds.ORDERS
    ]
    return html.Div(section_table(HEADERS, rows))
