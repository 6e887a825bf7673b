import pytest


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate tests from PWHASH_* variables and the cached config."""
    from pwhash_core.config import reset_config

    monkeypatch.delenv("PWHASH_ENABLED_FAMILIES", raising=False)
    monkeypatch.delenv("PWHASH_PBKDF2_BACKEND", raising=False)
    reset_config()
    yield
    reset_config()
