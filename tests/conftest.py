import pytest

from flashembed.config import get_settings


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so monkeypatched env vars apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
