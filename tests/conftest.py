"""Shared pytest configuration for domain and core tests."""

import pytest

from music_catalog.core.config import ENV_ADMIN_PASSWORD, ENV_ADMIN_USERNAME


@pytest.fixture(autouse=True)
def isolated_credentials_env(monkeypatch):
    """Keep admin credential overrides (including ones loaded from .env) out of other tests."""
    for name in (ENV_ADMIN_USERNAME, ENV_ADMIN_PASSWORD):
        # setenv first so the original state is restored even when load_dotenv sets it later
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
