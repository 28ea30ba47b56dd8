"""Returns tab."""
from dash import html

from shop_dashboard.components.cards import empty_note
from shop_dashboard.components.tables import section_table, status_badge
from shop_dashboard import data_state as ds

HEADERS = ["ID", "Customer", "Reason", "Status"]


def layout():
    if not ds.RETURNS:
        return empty_note("No returns.")
    rows = [
        [r["id"], r["customer"], r["reason"], status_badge(r["status"])]
        for r in ds.RETURNS
    ]
    return html.Div(section_table(HEADERS, rows))
