"""KPI card for the header strip."""
from dash import html
import dash_bootstrap_components as dbc
from shop_dashboard.theme import *


def kpi_card(icon, title, value, color, subtitle=""):
    """Icon badge + uppercase title + big monospace value, accented in color."""
    text_children = [
        html.Div(title, className="kpi-label"),
        html.Div(str(value), className="kpi-value"),
    ]
    if subtitle:
        text_children.append(html.Div(subtitle, className="kpi-subtitle"))
    return dbc.Card(
        dbc.CardBody([
            html.Span(icon, className="kpi-icon", style={"backgroundColor": color}),
            html.Div(text_children, className="kpi-text"),
        ], className="kpi-body"),
        style={"borderLeft": f"4px solid {color}"},
        className=CARD_CLASS,
    )
