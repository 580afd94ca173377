"""Configure pytest environment for all tests."""

import pytest

from hemp.core.config import PresenterConfig, reset_config, set_config


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Give every test the default configuration, unaffected by HEMP_* variables."""
    for name in ("HEMP_CONFIG", "HEMP_DEFAULT_CASING", "HEMP_LOGGING_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    set_config(PresenterConfig())
    yield
    reset_config()
