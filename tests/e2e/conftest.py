"""E2E test fixtures: real API, isolated config."""

import os

import pytest


@pytest.fixture
def api_key():
    key = os.environ.get("IUCN_REDLIST_KEY")
    if not key:
        pytest.skip("IUCN_REDLIST_KEY required for E2E tests")
    return key


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Temp config file (NOT ~/.config, to avoid overwriting a real saved key)."""
    path = tmp_path / "config.env"
    monkeypatch.setenv("IUCN_REDLIST_CONFIG", str(path))
    return path
