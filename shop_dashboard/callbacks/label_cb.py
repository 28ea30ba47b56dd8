"""Orders tab callbacks — shipping label generation."""
from dash import Input, Output, ALL, ctx, no_update
import dash_bootstrap_components as dbc

from shop_dashboard.data_source import fake_label


def label_toast(triggered_id, n_clicks):
    """Run the label stub for the clicked order and wrap its message in a toast."""
    if not isinstance(triggered_id, dict) or not n_clicks:
        return no_update
    message = fake_label(triggered_id["index"])
    return dbc.Toast(
        message,
        header="Shipping Label",
        icon="success",
        duration=3000,
        style={"position": "fixed", "top": 20, "right": 20, "zIndex": 9999},
    )


def register_callbacks(app):
    @app.callback(
        Output("toast-container", "children"),
        Input({"type": "label-btn", "index": ALL}, "n_clicks"),
        prevent_initial_call=True,
    )
    def generate_label(n_clicks):
        n = ctx.triggered[0]["value"] if ctx.triggered else None
        return label_toast(ctx.triggered_id, n)
