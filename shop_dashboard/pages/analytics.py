"""Analytics tab — monthly order volume and return-rate trend."""
from dash import dcc
import dash_bootstrap_components as dbc
import plotly.graph_objects as go

from shop_dashboard.theme import *
from shop_dashboard.components.cards import section, make_chart
from shop_dashboard.metrics import aggregate_monthly, monthly_frame
from shop_dashboard import data_state as ds


def order_volume_figure(orders):
    """Bar of order count per month bucket (first-seen month order)."""
    df = monthly_frame(aggregate_monthly(orders))
    fig = go.Figure(go.Bar(x=df["month"], y=df["count"], marker_color=BLUE, name="Orders"))
    return make_chart(fig)


def return_rate_figure(returns):
    """Line of the month's return rate (last reported value per month)."""
    df = monthly_frame(aggregate_monthly(returns))
    fig = go.Figure(go.Scatter(x=df["month"], y=df["rate"], mode="lines",
                               line=dict(color=ORANGE, width=2, shape="spline"),
                               name="Return rate"))
    return make_chart(fig)


def layout():
    return dbc.Row([
        dbc.Col(section("Monthly Order Volume",
                        dcc.Graph(figure=order_volume_figure(ds.ORDERS),
                                  config={"displayModeBar": False})), lg=6),
        dbc.Col(section("Return Rate Trend",
                        dcc.Graph(figure=return_rate_figure(ds.RETURNS),
                                  config={"displayModeBar": False}), color=ORANGE), lg=6),
    ])
