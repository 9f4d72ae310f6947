"""Shared pytest fixtures.

Provides:
- A complete, valid setup form
- A default validation engine
- A test client bound to the FastAPI app (lifespan included)
"""

import pytest
from fastapi.testclient import TestClient

from config_validator.validators import ValidationEngine


VALID_FORM = {
    "controller-host": "acme.saas.appdynamics.com",
    "controller-port": "443",
    "account-name": "acme",
    "access-key": "ABCDEFGHIJ1234567890",
    "app-name": "checkout",
    "tier-name": "web",
    "node-name": "web-01",
}


@pytest.fixture
def valid_form() -> dict:
    return dict(VALID_FORM)


@pytest.fixture
def engine() -> ValidationEngine:
    return ValidationEngine()


@pytest.fixture
def client():
    from config_validator.main import app

    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
