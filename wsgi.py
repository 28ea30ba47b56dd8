"""
WSGI entry point for deployment (Gunicorn).
    gunicorn wsgi:server -c gunicorn.conf.py
"""
from shop_dashboard.config import configure_logging

configure_logging()

from shop_dashboard.app import server  # noqa: E402
