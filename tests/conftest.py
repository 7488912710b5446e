"""
Test configuration and fixtures
"""

from unittest.mock import create_autospec

import pytest
from fastapi.testclient import TestClient

from petclinic.api.v1.routes.deps import get_owner_service
from petclinic.core.config import Settings
from petclinic.db.init_db import init_db
from petclinic.db.session import make_engine, make_session_factory
from petclinic.main import create_app
from petclinic.services.base import OwnerService
from petclinic.services.registry import build_map_services, build_orm_services


@pytest.fixture
def test_settings():
    return Settings(storage_backend="map", load_sample_data=False)


@pytest.fixture
def map_services():
    """Fresh in-memory services; every store starts empty."""
    return build_map_services()


@pytest.fixture
def session_factory():
    # In-memory SQLite pinned to one connection; tables are created per test.
    engine = make_engine("sqlite://")
    init_db(engine)
    yield make_session_factory(engine)
    engine.dispose()


@pytest.fixture
def orm_services(session_factory):
    return build_orm_services(session_factory)


@pytest.fixture
def app(test_settings, map_services):
    return create_app(test_settings, services=map_services)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def owner_service_mock(app):
    """Autospec'd OwnerService injected in place of the real one."""
    mock = create_autospec(OwnerService, instance=True)
    app.dependency_overrides[get_owner_service] = lambda: mock
    return mock
