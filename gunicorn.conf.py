"""Gunicorn config — bind port and log level follow the dashboard's .env settings.

    gunicorn wsgi:server -c gunicorn.conf.py
"""
from shop_dashboard.config import get_settings

_settings = get_settings()

bind = f"0.0.0.0:{_settings.port}"
loglevel = _settings.log_level.lower()
accesslog = "-"

# Load the app (and its sample data) once in the master, then fork.
preload_app = True
workers = 2
