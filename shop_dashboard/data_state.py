"""
data_state.py — Loaded record collections and the header KPIs.
This is the single source of truth for dashboard data.
Every page/callback imports from here instead of fetching on its own.
"""

import logging

from shop_dashboard.data_source import load_all
from shop_dashboard.metrics import dashboard_analytics

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════════
#  UTILITY FUNCTIONS
# ══════════════════════════════════════════════════════════════════════════════

def fmt_hours(val):
    """Format an hour count for a KPI card: 4.0 -> '4.0'."""
    return f"{float(val):.1f}"


def fmt_pct(val):
    """Format a percentage for a KPI card: 12.5 -> '12.5%'."""
    return f"{val}%"


# ══════════════════════════════════════════════════════════════════════════════
#  LOAD ALL DATA
# ══════════════════════════════════════════════════════════════════════════════

ORDERS = []
INVENTORY = []
RETURNS = []
ANALYTICS = dashboard_analytics([], [])


def reload(loader=load_all):
    """Re-fetch every collection and recompute ANALYTICS. Returns counts."""
    global ORDERS, INVENTORY, RETURNS, ANALYTICS

    fresh = loader()
    ORDERS = fresh["ORDERS"]
    INVENTORY = fresh["INVENTORY"]
    RETURNS = fresh["RETURNS"]
    ANALYTICS = dashboard_analytics(ORDERS, RETURNS)

    return {
        "orders": len(ORDERS),
        "inventory": len(INVENTORY),
        "returns": len(RETURNS),
        "return_rate": ANALYTICS["return_rate"],
    }


reload()
