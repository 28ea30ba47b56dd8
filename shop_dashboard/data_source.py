"""
data_source.py — Placeholder shop / shipping API layer.

Stands in for the Shopify/WooCommerce and ShipStation/ShipHero endpoints.
Every "fetch" sleeps for the configured delay and returns fixed sample
records, so the rest of the dashboard is written against the same shapes
a real integration would return:

  /orders     — list[dict]: id, customer, status, fulfillment_hrs, date
  /inventory  — list[dict]: sku, name, stock, channel
  /returns    — list[dict]: id, customer, reason, status, date, rate
"""

import copy
import logging
import time
from concurrent.futures import ThreadPoolExecutor

from shop_dashboard.config import get_settings

logger = logging.getLogger(__name__)

ENDPOINTS = ("/orders", "/inventory", "/returns")

# ── Sample records ──────────────────────────────────────────────────────────
SAMPLE_ORDERS = [
    {"id": "1001", "customer": "GANKIMA GOLI", "status": "Pending",
     "fulfillment_hrs": 0, "date": "2025-04-20"},
    {"id": "1002", "customer": "Mara Lindqvist", "status": "Shipped",
     "fulfillment_hrs": 18, "date": "2025-03-02"},
    {"id": "1003", "customer": "Tomas Herrera", "status": "Delivered",
     "fulfillment_hrs": 26, "date": "2025-03-15"},
    {"id": "1004", "customer": "Aiko Tanaka", "status": "Shipped",
     "fulfillment_hrs": 12, "date": "2025-04-03"},
]

SAMPLE_INVENTORY = [
    {"sku": "SKU-001", "name": "Wireless Earbuds", "stock": 100, "channel": "JINGDONG"},
    {"sku": "SKU-002", "name": "USB-C Charging Cable", "stock": 340, "channel": "Shopify"},
    {"sku": "SKU-003", "name": "Phone Stand", "stock": 0, "channel": "WooCommerce"},
]

SAMPLE_RETURNS = [
    {"id": "R-01", "customer": "GANKIMA GOLI", "reason": "Defective",
     "status": "Received", "date": "2025-04-22", "rate": 5},
    {"id": "R-02", "customer": "Tomas Herrera", "reason": "Wrong size",
     "status": "Refunded", "date": "2025-03-20", "rate": 3},
]

_SAMPLES = {
    "/orders": SAMPLE_ORDERS,
    "/inventory": SAMPLE_INVENTORY,
    "/returns": SAMPLE_RETURNS,
}


def fake_fetch(key, delay=None):
    """Pretend network call: wait, then return a copy of the sample list for key."""
    if delay is None:
        delay = get_settings().fetch_delay
    if delay:
        time.sleep(delay)
    return copy.deepcopy(_SAMPLES.get(key, []))


def load_all(fetch=fake_fetch) -> dict:
    """
    Fetch orders, inventory and returns in parallel.

    Returns
    -------
    dict with keys: ORDERS, INVENTORY, RETURNS (each list[dict])

    If any fetch fails the error is logged and all three come back empty,
    so the dashboard still renders.
    """
    try:
        with ThreadPoolExecutor(max_workers=len(ENDPOINTS)) as pool:
            orders, inventory, returns = pool.map(fetch, ENDPOINTS)
    except Exception:
        logger.exception("Data load failed, showing empty dashboard")
        return {"ORDERS": [], "INVENTORY": [], "RETURNS": []}

    logger.info(f"Loaded {len(orders)} orders, {len(inventory)} inventory items, "
                f"{len(returns)} returns")
    return {"ORDERS": orders, "INVENTORY": inventory, "RETURNS": returns}


def fake_label(order_id) -> str:
    """Stub for the shipping-label API. Returns the confirmation message."""
    message = f"Shipping label for {order_id}"
    logger.info(message)
    return message
