import pytest
from fastapi.testclient import TestClient

from mockapi.config import Settings
from mockapi.database import Store
from mockapi.main import create_app


@pytest.fixture
def store():
    return Store()


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def app(store, settings):
    return create_app(store=store, settings=settings)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def auth_headers():
    return {"Authorization": "Bearer mock-jwt-token"}
