"""
Shop Admin Dashboard — orders, inventory, returns + analytics at a glance.
Run:  python -m shop_dashboard.app
Open: http://127.0.0.1:8070

Data comes from the placeholder API layer in data_source.py. To wire real
shop/shipping endpoints, put SHOP_API_KEY / SHIP_API_KEY in .env and
replace fake_fetch / fake_label.
"""

import os
import logging

import dash
from dash import html, dcc
import dash_bootstrap_components as dbc
from flask import jsonify

from shop_dashboard.config import configure_logging, get_settings
from shop_dashboard.theme import *
from shop_dashboard.tab_state import TabSet
from shop_dashboard.components.kpi import kpi_card
from shop_dashboard.components.tabs import tab_list
from shop_dashboard.callbacks.tabs_cb import TABS, TAB_IDS, render_panels
from shop_dashboard import data_state as ds

logger = logging.getLogger(__name__)

# ── Create the Dash app ──────────────────────────────────────────────────────
app = dash.Dash(
    __name__,
    suppress_callback_exceptions=True,
    external_stylesheets=[dbc.themes.DARKLY],
    assets_folder=os.path.join(os.path.dirname(__file__), "assets"),
    title="Shop Admin Dashboard",
)
server = app.server  # For deployment (Gunicorn)


# ── KPI strip ────────────────────────────────────────────────────────────────
def _build_kpis():
    a = ds.ANALYTICS
    return html.Div([
        kpi_card("\U0001f4e6", "Orders", a["order_volume"], BLUE),
        kpi_card("\U0001f69a", "Avg. Fulfillment (hrs)", ds.fmt_hours(a["fulfillment_time"]), GREEN),
        kpi_card("↻", "Return Rate", ds.fmt_pct(a["return_rate"]), ORANGE),
    ], className="kpi-strip")


# ── App layout ───────────────────────────────────────────────────────────────
def serve_layout():
    # One TabSet per page load; the browser-side store carries it afterwards.
    tabs = TabSet(get_settings().default_tab, TAB_IDS)
    return html.Div([
        dcc.Store(id="active-tab", storage_type="memory", data=tabs.to_store()),

        html.Div([
            html.H3("SHOP ADMIN"),
            html.Div(f"{len(ds.ORDERS)} orders  |  {len(ds.INVENTORY)} SKUs  |  "
                     f"{len(ds.RETURNS)} returns", className="header-subtitle"),
        ], className="app-header mb-3"),

        _build_kpis(),

        tab_list(TABS, tabs),
        dcc.Loading(html.Div(render_panels(tabs), id="tab-body"), type="circle"),

        # Toast notification container
        html.Div(id="toast-container"),
    ], style={"padding": "24px", "backgroundColor": BG, "minHeight": "100vh"})


app.layout = serve_layout


# ── Data reload endpoint ─────────────────────────────────────────────────────
@server.route("/api/reload")
def api_reload():
    """Re-fetch all collections. Gunicorn workers hit this after start."""
    result = ds.reload()
    logger.info(f"Reloaded data: {result}")
    return jsonify({"status": "ok", **result})


# ── Register callbacks ───────────────────────────────────────────────────────
# Import callback modules AFTER app is created so they can reference `app`
from shop_dashboard.callbacks import tabs_cb, label_cb
tabs_cb.register_callbacks(app)
label_cb.register_callbacks(app)

# ── Run ──────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    settings = get_settings()
    configure_logging(settings)
    print(f"\n  Shop Admin Dashboard")
    print(f"  http://127.0.0.1:{settings.port}\n")
    app.run(debug=False, host="0.0.0.0", port=settings.port)
