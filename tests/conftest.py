import pytest
import structlog

from rmg.infrastructure.config import get_settings


@pytest.fixture(autouse=True)
def _isolate_ambient_state(monkeypatch):
    """Each test starts with default settings and unconfigured structlog."""
    for name in ("RMG_LOG_LEVEL", "RMG_LOG_JSON", "RMG_CURRENCY_SYMBOL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
