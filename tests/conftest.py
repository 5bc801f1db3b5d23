"""Shared fixtures: a fresh application, store and client per test."""

import pytest
from fastapi.testclient import TestClient

from person_api.app.core.config import Settings
from person_api.app.core.store import PersonStore
from person_api.app.main import create_app
from person_api.app.schemas.person import PersonCreate


@pytest.fixture
def person_payload():
    """A valid person request body in wire (camelCase) form."""
    return {
        "status": "Active",
        "firstName": "Hiro",
        "lastName": "Protagonist",
        "emailAddress": "deliverator@mrlees.com",
        "addressLine1": "123 Any St.",
        "addressLine2": "Apt 456",
        "city": "Los Angeles",
        "state": "California",
        "zipCode": "12345",
    }


@pytest.fixture
def person_in(person_payload):
    return PersonCreate(**person_payload)


@pytest.fixture
def store():
    return PersonStore()


@pytest.fixture
def settings():
    return Settings(seed_sample_data=False)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
