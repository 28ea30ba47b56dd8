import os

# Set before any shop_dashboard import: data_state fetches on import.
os.environ["FETCH_DELAY"] = "0"
os.environ["DEFAULT_TAB"] = "orders"

import pytest

from shop_dashboard import data_state as ds


def _walk(component):
    if component is None or isinstance(component, (str, int, float)):
        return
    if isinstance(component, (list, tuple)):
        for child in component:
            yield from _walk(child)
        return
    yield component
    yield from _walk(getattr(component, "children", None))


@pytest.fixture
def walk():
    """Iterate a component and every descendant Dash component."""
    return lambda component: list(_walk(component))


@pytest.fixture
def sample_orders():
    return [
        {"id": "1", "customer": "A", "status": "Pending", "fulfillment_hrs": 2, "date": "2025-03-01"},
        {"id": "2", "customer": "B", "status": "Shipped", "fulfillment_hrs": 4, "date": "2025-01-10"},
        {"id": "3", "customer": "C", "status": "Delivered", "fulfillment_hrs": 6, "date": "2025-03-28"},
    ]


@pytest.fixture
def restore_data():
    yield
    ds.reload()
