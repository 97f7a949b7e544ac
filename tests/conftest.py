import pytest
import structlog

from fulfillment.infrastructure.config import get_settings


@pytest.fixture(autouse=True)
def _reset_global_state():
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    get_settings.cache_clear()
