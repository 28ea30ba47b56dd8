"""
config.py — Environment-driven settings for the dashboard.

Values come from the process environment, with a project-root .env file
loaded first (SHOP_API_KEY / SHIP_API_KEY are placeholders for the real
shop and shipping integrations; only their presence is reported).
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

# BASE_DIR points to the project root (parent of shop_dashboard/)
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8070
DEFAULT_FETCH_DELAY = 0.2
DEFAULT_TAB = "orders"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(frozen=True)
class Settings:
    shop_api_key: str = ""
    ship_api_key: str = ""
    port: int = DEFAULT_PORT
    fetch_delay: float = DEFAULT_FETCH_DELAY
    default_tab: str = DEFAULT_TAB
    log_level: str = "INFO"

    @property
    def shop_api_configured(self) -> bool:
        return bool(self.shop_api_key)

    @property
    def ship_api_configured(self) -> bool:
        return bool(self.ship_api_key)


def _env_number(name, default, cast):
    raw = os.environ.get(name, "")
    if raw == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Read settings from .env + environment once per process.

    Call get_settings.cache_clear() after changing the environment.
    """
    load_dotenv(os.path.join(BASE_DIR, ".env"))
    delay = _env_number("FETCH_DELAY", DEFAULT_FETCH_DELAY, float)
    level = (os.environ.get("LOG_LEVEL", "") or "INFO").upper()
    if level not in LOG_LEVELS:
        logger.warning(f"Ignoring invalid LOG_LEVEL={level!r}, using INFO")
        level = "INFO"
    return Settings(
        shop_api_key=os.environ.get("SHOP_API_KEY", ""),
        ship_api_key=os.environ.get("SHIP_API_KEY", ""),
        port=_env_number("PORT", DEFAULT_PORT, int),
        fetch_delay=max(delay, 0.0),
        default_tab=os.environ.get("DEFAULT_TAB", "") or DEFAULT_TAB,
        log_level=level,
    )


def configure_logging(settings: Settings = None):
    """Set root logging format/level once, at app start."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    logger.info(f"Shop API: {'Configured' if settings.shop_api_configured else 'Missing'}")
    logger.info(f"Ship API: {'Configured' if settings.ship_api_configured else 'Missing'}")
