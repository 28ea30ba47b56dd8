import pytest

from shop_dashboard.config import DEFAULT_PORT, get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_settings_read_once_per_process(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("DEFAULT_TAB", "returns")
    assert get_settings() is first
    get_settings.cache_clear()
    assert get_settings().default_tab == "returns"


def test_defaults(monkeypatch):
    for name in ("SHOP_API_KEY", "SHIP_API_KEY", "PORT", "LOG_LEVEL"):
        monkeypatch.setenv(name, "")
    s = get_settings()
    assert s.port == DEFAULT_PORT
    assert s.default_tab == "orders"
    assert s.log_level == "INFO"
    assert not s.shop_api_configured
    assert not s.ship_api_configured


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("FETCH_DELAY", "0.5")
    monkeypatch.setenv("DEFAULT_TAB", "analytics")
    monkeypatch.setenv("SHOP_API_KEY", "shop-key")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = get_settings()
    assert s.port == 9000
    assert s.fetch_delay == 0.5
    assert s.default_tab == "analytics"
    assert s.shop_api_configured
    assert s.log_level == "DEBUG"


def test_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("PORT", "eighty")
    monkeypatch.setenv("FETCH_DELAY", "-3")
    monkeypatch.setenv("LOG_LEVEL", "loud")
    s = get_settings()
    assert s.port == DEFAULT_PORT
    assert s.fetch_delay == 0.0
    assert s.log_level == "INFO"
