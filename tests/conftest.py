import pytest
from fastapi.testclient import TestClient

from counter_service.core.config import Settings
from counter_service.main import create_application
from counter_service.services.counter import CounterStore


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def store():
    return CounterStore()


@pytest.fixture
def app(settings, store):
    return create_application(settings=settings, store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
