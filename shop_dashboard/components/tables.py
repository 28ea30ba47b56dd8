"""Reusable table builders."""
from dash import html
import dash_bootstrap_components as dbc
from shop_dashboard.theme import *


def status_badge(status):
    """Colored pill for an order/return status."""
    color = STATUS_COLORS.get(status, GRAY)
    return html.Span(status, style={
        "color": color, "border": f"1px solid {color}", "borderRadius": "10px",
        "padding": "1px 8px", "fontSize": "11px", "fontWeight": "600",
        "whiteSpace": "nowrap",
    })


def section_table(headers, rows):
    """Header row + one <tr> per row; cells may be text or components."""
    return html.Div(dbc.Table([
        html.Thead(html.Tr([html.Th(h) for h in headers])),
        html.Tbody([
            html.Tr([html.Td(cell) for cell in cells])
            for cells in rows
        ]),
    ], striped=True, hover=True, size="sm", className="mb-0 text-nowrap"),
        style={"overflowX": "auto", "border": "1px solid #ffffff20", "borderRadius": "4px"})
