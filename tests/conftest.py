"""Shared fixtures for the namecase test suite."""

import pytest

from namecase.logging.context import clear_log_context

NAMECASE_ENV_VARS = (
    "NAMECASE_LOG_LEVEL",
    "NAMECASE_CONVENTION",
    "NAMECASE_POLICY",
    "ENVIRONMENT",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every namecase environment override for the test."""
    for name in NAMECASE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture(autouse=True)
def clean_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()
