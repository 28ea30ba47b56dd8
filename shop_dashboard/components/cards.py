"""Reusable card/section builders."""
from dash import html
import dash_bootstrap_components as dbc
from shop_dashboard.theme import *


def section(title, children, color=CYAN):
    """Card with a title bar underlined in the accent color."""
    header = dbc.CardHeader(title, className="section-title",
                            style={"color": color, "borderBottomColor": color})
    return dbc.Card([header, dbc.CardBody(children)], className="section mb-3")


def make_chart(fig, height=260):
    """Apply consistent styling to a Plotly figure."""
    fig.update_layout(**CHART_LAYOUT, height=height, showlegend=False)
    return fig


def empty_note(text):
    return html.P(text, style={"color": GRAY, "textAlign": "center", "padding": "40px"})
