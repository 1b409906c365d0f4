"""
Pytest configuration and fixtures for accept_language tests.
"""

import os

import pytest

# Set test environment variables before importing config
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["SUPPORTED_LOCALES"] = "en-US,fr-CA,zh-Hant-TW,de"
os.environ["DEFAULT_LOCALE"] = "en-US"
os.environ.pop("LOG_FILE", None)

from fastapi.testclient import TestClient  # noqa: E402

# Mixed-quality header shared by parser and matcher tests
COMPLEX_HEADER = "fr-CA,fr;q=0.2,en-US;q=0.6,en;q=0.4,*;q=0.5"


@pytest.fixture
def complex_header() -> str:
    return COMPLEX_HEADER


@pytest.fixture(scope="function")
def client():
    """Create a test client for the demo application."""
    from accept_language.main import app

    with TestClient(app) as test_client:
        yield test_client
