"""
Shared pytest fixtures.

Every test gets its own freshly seeded PropertyStore, installed into the app
through dependency_overrides, so tests never see each other's writes.
"""

from __future__ import annotations

from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from afrihome.main import app
from afrihome.models import Property
from afrihome.seed import seed_demo_data
from afrihome.storage import PropertyStore, get_store


@pytest.fixture
def store() -> PropertyStore:
    s = PropertyStore()
    seed_demo_data(s)
    return s


@pytest.fixture
def empty_store() -> PropertyStore:
    return PropertyStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def registered_user(client) -> Dict[str, Any]:
    """Register a fresh account and return the token response body."""
    resp = client.post(
        "/api/register",
        json={
            "username": "amara",
            "password": "secret123",
            "email": "amara@example.com",
            "fullName": "Amara Okafor",
            "isAgent": True,
        },
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.fixture
def auth_headers(registered_user) -> Dict[str, str]:
    return {"Authorization": f"Bearer {registered_user['accessToken']}"}


@pytest.fixture
def make_property():
    """Factory for standalone Property records (not stored)."""
    counter = {"next": 1}

    def _make(**overrides: Any) -> Property:
        data: Dict[str, Any] = {
            "id": counter["next"],
            "title": "Test listing",
            "description": "A listing used in tests.",
            "price": 100000,
            "country": "Kenya",
            "city": "Nairobi",
            "property_type": "apartment",
            "listing_type": "sale",
            "main_image": "https://example.com/main.jpg",
            "user_id": 1,
            "created_at": "2024-01-01T00:00:00Z",
        }
        data.update(overrides)
        counter["next"] += 1
        return Property(**data)

    return _make
