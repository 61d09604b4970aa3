"""Pytest configuration and shared fixtures."""

import os

os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")
os.environ.setdefault("MONGO_DB", "showroom_test")
os.environ.setdefault("ACCESS_TOKEN_SECRET_KEY", "test-secret-key")
os.environ.setdefault(
    "AZURE_STORAGE_CONNECTION_STRING",
    "DefaultEndpointsProtocol=https;AccountName=testaccount;"
    "AccountKey=dGVzdGtleQ==;EndpointSuffix=core.windows.net",
)

import pytest
from typing import Dict
from unittest.mock import MagicMock

from bson import ObjectId
from fastapi.testclient import TestClient

from main import app
from showroom.auth import security
from showroom.core.dependencies import get_image_store, get_mongo_db
from showroom.crud import admin_crud, booking_crud, car_crud, notification_crud
from tests.factories import FakeImageStore, InMemoryDocumentStore


@pytest.fixture
def image_store() -> FakeImageStore:
    return FakeImageStore()


@pytest.fixture
def memory_db(monkeypatch) -> InMemoryDocumentStore:
    """Route every CRUD call into an in-memory document store."""
    store = InMemoryDocumentStore()
    for name in (
        "create_car",
        "get_car",
        "get_all_cars",
        "update_car",
        "delete_car",
        "get_referenced_asset_ids",
    ):
        monkeypatch.setattr(car_crud, name, getattr(store, name))
    for name in ("create_booking", "get_all_bookings_with_car", "delete_booking"):
        monkeypatch.setattr(booking_crud, name, getattr(store, name))
    for name in ("create_notification", "get_all_notifications"):
        monkeypatch.setattr(notification_crud, name, getattr(store, name))
    for name in ("get_by_email", "create_admin"):
        monkeypatch.setattr(admin_crud, name, getattr(store, name))
    return store


@pytest.fixture
def db() -> MagicMock:
    """Opaque database handle; the CRUD layer is replaced by memory_db."""
    return MagicMock()


@pytest.fixture
def client(image_store, memory_db):
    """Test client with the database and image store swapped for doubles."""
    app.dependency_overrides[get_mongo_db] = lambda: MagicMock()
    app.dependency_overrides[get_image_store] = lambda: image_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> Dict[str, str]:
    token = security.create_access_token(
        subject=str(ObjectId()), email="admin@showroom.test", role="admin"
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def customer_headers() -> Dict[str, str]:
    token = security.create_access_token(
        subject=str(ObjectId()), email="visitor@showroom.test", role="customer"
    )
    return {"Authorization": f"Bearer {token}"}
