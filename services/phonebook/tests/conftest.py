"""Shared fixtures: an isolated in-memory database per test."""

import pytest
from fastapi.testclient import TestClient

from common.db import make_engine
from services.phonebook.app.main import create_app
from services.phonebook.app.settings import Settings
from services.phonebook.app.store import ContactStore


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(database_url="sqlite://", static_dir=str(tmp_path / "dist"))


@pytest.fixture
def store() -> ContactStore:
    s = ContactStore(make_engine("sqlite://"))
    s.ensure_tables()
    yield s
    s.close()


@pytest.fixture
def client(settings, store) -> TestClient:
    app = create_app(settings, store=store)
    with TestClient(app) as c:
        yield c
