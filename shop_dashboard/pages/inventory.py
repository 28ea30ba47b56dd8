"""Inventory tab — stock levels per SKU and sales channel."""
from dash import html

from shop_dashboard.theme import *
from shop_dashboard.components.cards import empty_note
from shop_dashboard.components.tables import section_table
from shop_dashboard import data_state as ds

HEADERS = ["SKU", "Product", "Stock", "Channel"]
LOW_STOCK = 10


def _stock_cell(stock):
    color = GREEN if stock > LOW_STOCK else ORANGE if stock > 0 else RED
    label = f"{stock}" if stock > 0 else "OUT"
    return html.Span(label, style={"color": color, "fontWeight": "bold", "fontFamily": "monospace"})


def layout():
    if not ds.INVENTORY:
        return empty_note("No inventory items.")
    rows = [
        [i["sku"], i["name"], _stock_cell(i["stock"]), i["channel"]]
        for i in ds.INVENTORY
    ]
    return html.Div(section_table(HEADERS, rows))
