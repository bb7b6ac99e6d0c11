from __future__ import annotations

import io

import mongomock
import pytest
from fastapi.testclient import TestClient
from PIL import Image

from vlogsite.core.config import settings
from vlogsite.core.security import create_access_token
from vlogsite.db import session
from vlogsite.services.page_cache import page_cache


@pytest.fixture(autouse=True)
def app_settings(monkeypatch):
    monkeypatch.setattr(settings, "SECRET_KEY", "test-secret")
    monkeypatch.setattr(settings, "ADMIN_USERNAME", "admin")
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", "password")
    monkeypatch.setattr(settings, "MONGODB_DB", "vlogsite_test")
    monkeypatch.setattr(settings, "CLOUDINARY_CLOUD_NAME", "")
    monkeypatch.setattr(settings, "CLOUDINARY_API_KEY", "")
    monkeypatch.setattr(settings, "CLOUDINARY_API_SECRET", "")
    monkeypatch.setattr(settings, "CLOUDINARY_FOLDER", "")
    return settings


@pytest.fixture(autouse=True)
def mongo(monkeypatch):
    monkeypatch.setattr(session, "MongoClient", mongomock.MongoClient)
    session.get_client.cache_clear()
    page_cache.clear()
    yield session.get_database()
    session.get_client.cache_clear()
    page_cache.clear()


@pytest.fixture
def broken_storage(monkeypatch):
    from pymongo.errors import ServerSelectionTimeoutError

    def _unreachable():
        raise ServerSelectionTimeoutError("localhost:27017: [Errno 111] Connection refused")

    monkeypatch.setattr(session, "get_database", _unreachable)


@pytest.fixture
def cloudinary_settings(monkeypatch):
    monkeypatch.setattr(settings, "CLOUDINARY_CLOUD_NAME", "demo")
    monkeypatch.setattr(settings, "CLOUDINARY_API_KEY", "123456789")
    monkeypatch.setattr(settings, "CLOUDINARY_API_SECRET", "shh")
    return settings


@pytest.fixture
def client():
    from vlogsite.main import app

    return TestClient(app)


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {create_access_token(subject='admin')}"}


@pytest.fixture
def png_bytes():
    buf = io.BytesIO()
    Image.new("RGB", (8, 8), color="green").save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def vlog_fields():
    return {
        "title": "Summer Camp Adventures!",
        "author": "Troop Leader",
        "content": "<p>" + "We pitched tents under the stars and sang by the fire. " * 2 + "</p>",
        "featured_image_url": "https://res.cloudinary.com/demo/image/upload/camp.jpg",
    }


@pytest.fixture
def contact_fields():
    return {
        "name": "Jane Scout",
        "email": "jane@scouts.org",
        "subject": "Joining the troop",
        "message": "How can my daughter join the next camp?",
    }
