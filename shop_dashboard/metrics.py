"""
metrics.py — KPI math and month bucketing for the dashboard.

Pure functions over already-loaded record lists (dicts). Nothing here
mutates its inputs or raises on odd values: division by zero yields 0 and
an unparsable date lands in the "Invalid" bucket.
"""

import math
from decimal import Decimal, ROUND_HALF_UP

import pandas as pd

# Fixed short month names, independent of the process locale
# (calendar.month_abbr follows LC_TIME).
MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
                "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
INVALID_MONTH = "Invalid"

_ONE_DECIMAL = Decimal("0.1")


# ══════════════════════════════════════════════════════════════════════════════
#  ROUNDING / RATIOS
# ══════════════════════════════════════════════════════════════════════════════

def round1(value):
    """Round to one decimal, half away from zero on the exact float value.

    round() would give banker's rounding (round(0.25, 1) == 0.2); dashboards
    show 0.3 here.
    """
    value = float(value)
    if not math.isfinite(value):
        return value
    return float(Decimal(value).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def percentage(part, total):
    """part/total as a percentage with one decimal; 0 when total is 0."""
    if total == 0:
        return 0
    return round1(part / total * 100)


def average_hours(values):
    """Mean of values with one decimal; 0 for an empty sequence."""
    values = list(values)
    if not values:
        return 0
    return round1(sum(values) / len(values))


# ══════════════════════════════════════════════════════════════════════════════
#  MONTHLY BUCKETS
# ══════════════════════════════════════════════════════════════════════════════

def month_label(value):
    """Short month name for a date-like value, or INVALID_MONTH."""
    if value is None or value == "":
        return INVALID_MONTH
    try:
        ts = pd.to_datetime(value, errors="coerce")
    except (TypeError, ValueError):
        return INVALID_MONTH
    if ts is None or pd.isna(ts):
        return INVALID_MONTH
    return MONTH_LABELS[ts.month - 1]


def _has_rate(rate):
    if rate is None or rate == "" or rate == 0:
        return False
    try:
        return not pd.isna(rate)
    except (TypeError, ValueError):
        return True


def aggregate_monthly(records):
    """Bucket records by month label.

    Each bucket is {"month", "count", "rate"}. count is the number of
    records in the month; rate is the last truthy "rate" seen for that month
    in input order (last write wins, not a sum or mean). Buckets come out in
    first-seen order of their labels, not calendar order.
    """
    buckets = {}
    for rec in records:
        month = month_label(rec.get("date"))
        if month not in buckets:
            buckets[month] = {"month": month, "count": 0, "rate": 0}
        bucket = buckets[month]
        bucket["count"] += 1
        rate = rec.get("rate")
        if _has_rate(rate):
            bucket["rate"] = rate
    return list(buckets.values())


def monthly_frame(buckets):
    """Buckets as a DataFrame (month, count, rate), bucket order kept."""
    return pd.DataFrame(list(buckets), columns=["month", "count", "rate"])


# ══════════════════════════════════════════════════════════════════════════════
#  HEADER KPIs
# ══════════════════════════════════════════════════════════════════════════════

def dashboard_analytics(orders, returns):
    """Order volume, average fulfillment hours and return rate."""
    hours = [o.get("fulfillment_hrs") or 0 for o in orders]
    return {
        "order_volume": len(orders),
        "fulfillment_time": average_hours(hours),
        "return_rate": percentage(len(returns), len(orders)),
    }
