import pytest

from gogar.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings for every test so environment overrides don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
