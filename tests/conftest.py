import os

import pytest

from credhash.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from CREDHASH_* variables and the cached settings."""
    for name in list(os.environ):
        if name.startswith("CREDHASH_"):
            monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
