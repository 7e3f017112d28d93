# tests/conftest.py

"""
Pytest configuration and shared fixtures for testing.
"""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import Mock
from typing import Generator

from main import create_app
from core.permission_helpers import build_actor
from dependencies.auth import CurrentUser, get_current_user
from models.enums import AppRole
from models.module import Module, WorkspaceModule


@pytest.fixture(scope="function")
def app():
    """Create a test FastAPI application instance."""
    return create_app()


@pytest.fixture(scope="function")
def client(app) -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def mock_current_user():
    return CurrentUser(
        id="user-1",
        email="marie@atelier.fr",
        full_name="Marie Dupont",
    )


@pytest.fixture
def authed_client(app, mock_current_user) -> Generator[TestClient, None, None]:
    """Client whose requests are authenticated as `mock_current_user`."""
    app.dependency_overrides[get_current_user] = lambda: mock_current_user
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# -----------------------------------------------------
# Actors
# -----------------------------------------------------
@pytest.fixture
def viewer_actor():
    return build_actor(AppRole.viewer)


@pytest.fixture
def member_actor():
    return build_actor(AppRole.member)


@pytest.fixture
def admin_actor():
    return build_actor(AppRole.admin)


@pytest.fixture
def owner_actor():
    return build_actor(AppRole.owner)


# -----------------------------------------------------
# Module catalog
# -----------------------------------------------------
@pytest.fixture
def catalog():
    return [
        Module(id="m-projects", slug="projects", is_core=True, name="Projets", sort_order=1),
        Module(id="m-tasks", slug="tasks", is_core=True, name="Tâches", sort_order=2),
        Module(id="m-crm", slug="crm", is_core=False, name="CRM", sort_order=3),
        Module(id="m-tenders", slug="tenders", is_core=False, name="Appels d'offres", sort_order=4),
        Module(id="m-construction", slug="construction", is_core=False, name="Chantier", sort_order=5),
        Module(id="m-time", slug="time-tracking", is_core=False, name="Temps", sort_order=6),
    ]


@pytest.fixture
def enablements_a():
    """Workspace A has CRM and tenders."""
    return [
        WorkspaceModule(workspace_id="ws-a", module_slug="crm"),
        WorkspaceModule(workspace_id="ws-a", module_slug="tenders"),
    ]


@pytest.fixture
def enablements_b():
    """Workspace B has no optional module."""
    return []


@pytest.fixture
def mock_supabase_client():
    """Create a mock Supabase client."""
    mock_client = Mock()
    mock_table = Mock()
    mock_client.table.return_value = mock_table
    return mock_client


def _query_mock(data=None, error=None):
    query = Mock()
    for method in ("select", "eq", "order", "limit", "upsert", "delete", "insert"):
        getattr(query, method).return_value = query
    if error is not None:
        query.execute.side_effect = error
    else:
        query.execute.return_value = Mock(data=data)
    return query


@pytest.fixture
def query_mock():
    """
    Factory for chainable PostgREST query mocks: every builder method returns
    the same mock; `execute()` returns `data` or raises `error`.
    """
    return _query_mock


@pytest.fixture(autouse=True)
def reset_cache():
    """Reset cache before each test."""
    from core.cache import cache_clear
    cache_clear()
    yield
    cache_clear()
