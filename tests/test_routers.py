# tests/test_routers.py

"""
HTTP surface tests. Auth and workspace membership are replaced through
FastAPI dependency overrides; providers are patched where routers import them.
"""

import logging

import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch

from core.errors import StorageError
from core.permission_helpers import build_actor
from dependencies.auth import get_current_user, get_workspace_actor
from models.enums import AppRole, Discipline


@pytest.fixture
def as_actor(app, mock_current_user):
    """Return a function that authenticates requests as a workspace member with `role`."""

    def _as(role: AppRole) -> TestClient:
        app.dependency_overrides[get_current_user] = lambda: mock_current_user
        app.dependency_overrides[get_workspace_actor] = lambda: build_actor(role)
        return TestClient(app)

    yield _as
    app.dependency_overrides.clear()


# -----------------------------------------------------
# Static configuration
# -----------------------------------------------------
def test_list_disciplines(client: TestClient):
    response = client.get("/config/disciplines")
    assert response.status_code == 200
    assert [d["slug"] for d in response.json()] == [
        "architecture", "interior_design", "scenography", "communication",
    ]


def test_unknown_discipline_terminology_falls_back(client: TestClient):
    fallback = client.get("/config/disciplines/bogus/terminology").json()
    assert fallback == client.get("/config/disciplines/architecture/terminology").json()
    assert fallback["client"] == "Maître d'ouvrage"


def test_discipline_views(client: TestClient):
    data = client.get("/config/disciplines/communication/views").json()

    assert data["discipline"] == "communication"
    assert "visite" not in [b["key"] for b in data["synthesis_blocks"]]
    assert data["tabs"][0]["icon"] == "layout-dashboard"


def test_read_discipline_definition(client: TestClient):
    data = client.get("/config/disciplines/scenographie").json()
    assert data["slug"] == "scenography"
    assert data["phases"][0]["code"] == "BRIEF"


def test_startup_lists_routes_without_a_path(app, caplog):
    class IncludedRouter:
        methods = None

    app.router.routes.append(IncludedRouter())

    with caplog.at_level(logging.DEBUG, logger="linea"):
        with TestClient(app):
            pass

    assert "IncludedRouter" in caplog.text


def test_health_app(client: TestClient):
    assert client.get("/health/app").json()["status"] == "ok"


def test_health_db_not_configured(client: TestClient):
    with patch("core.supabase_client.get_supabase_client", return_value=None):
        assert client.get("/health/db").json()["status"] == "not_configured"


# -----------------------------------------------------
# Auth
# -----------------------------------------------------
def test_workspace_routes_require_token(client: TestClient):
    response = client.get("/workspaces/ws-a/modules")
    assert response.status_code in (401, 403)


def test_non_member_is_forbidden(app, mock_current_user):
    app.dependency_overrides[get_current_user] = lambda: mock_current_user
    with patch("services.actor_permissions.resolve_actor", return_value=None):
        response = TestClient(app).get("/workspaces/ws-z/modules")
    app.dependency_overrides.clear()

    assert response.status_code == 403


# -----------------------------------------------------
# Modules
# -----------------------------------------------------
def test_list_workspace_modules(as_actor, catalog, enablements_a):
    client = as_actor(AppRole.viewer)
    with patch("routers.modules.list_modules", return_value=catalog), \
         patch("routers.modules.list_workspace_modules", return_value=enablements_a):
        response = client.get("/workspaces/ws-a/modules")

    assert response.status_code == 200
    enabled = {m["slug"]: m["enabled"] for m in response.json()}
    assert enabled == {
        "projects": True, "tasks": True, "crm": True,
        "tenders": True, "construction": False, "time-tracking": False,
    }


def test_list_workspace_modules_storage_failure(as_actor):
    client = as_actor(AppRole.viewer)
    with patch("routers.modules.list_modules", side_effect=StorageError("List modules", "timeout")):
        response = client.get("/workspaces/ws-a/modules")

    assert response.status_code == 500


def test_member_cannot_toggle_modules(as_actor):
    client = as_actor(AppRole.member)
    with patch("routers.modules.enable_module") as enable:
        response = client.post("/workspaces/ws-a/modules/crm")

    assert response.status_code == 403
    enable.assert_not_called()


def test_admin_enables_and_disables_module(as_actor):
    client = as_actor(AppRole.admin)
    with patch("routers.modules.enable_module") as enable, \
         patch("routers.modules.disable_module", return_value=True) as disable:
        enabled = client.post("/workspaces/ws-a/modules/crm")
        disabled = client.delete("/workspaces/ws-a/modules/crm")

    assert enabled.status_code == 200 and enabled.json()["enabled"] is True
    assert disabled.status_code == 200 and disabled.json()["enabled"] is False
    enable.assert_called_once_with("ws-a", "crm")
    disable.assert_called_once_with("ws-a", "crm")


def test_core_module_toggle_is_rejected(as_actor):
    client = as_actor(AppRole.owner)
    with patch("routers.modules.enable_module", side_effect=ValueError("Core module 'projects' is always enabled")):
        response = client.post("/workspaces/ws-a/modules/projects")

    assert response.status_code == 400


# -----------------------------------------------------
# Navigation
# -----------------------------------------------------
def test_navigation_check_redirects_on_switch(as_actor, catalog):
    client = as_actor(AppRole.member)
    with patch("routers.modules.list_modules", return_value=catalog), \
         patch("routers.modules.list_workspace_modules", return_value=[]):
        response = client.post(
            "/workspaces/ws-b/navigation/check",
            json={"previous_workspace_id": "ws-a", "path": "/crm/leads"},
        )

    assert response.status_code == 200
    assert response.json()["redirect"] == {"target": "/", "module_slug": "crm", "reason": "module_disabled"}


@pytest.mark.parametrize("previous", [None, "ws-b"])
def test_navigation_check_without_switch(as_actor, catalog, previous):
    client = as_actor(AppRole.member)
    with patch("routers.modules.list_modules", return_value=catalog), \
         patch("routers.modules.list_workspace_modules", return_value=[]):
        response = client.post(
            "/workspaces/ws-b/navigation/check",
            json={"previous_workspace_id": previous, "path": "/crm"},
        )

    assert response.json()["redirect"] is None


def test_sub_nav(as_actor, catalog, enablements_a):
    client = as_actor(AppRole.viewer)
    with patch("routers.modules.list_modules", return_value=catalog), \
         patch("routers.modules.list_workspace_modules", return_value=enablements_a):
        response = client.get("/workspaces/ws-a/navigation/tasks/sub-nav")

    assert [i["key"] for i in response.json()] == ["board"]


# -----------------------------------------------------
# Capabilities / permissions / views
# -----------------------------------------------------
def test_evaluate_capability(authed_client: TestClient):
    with patch("routers.workspaces.resolve_actor", return_value=build_actor(AppRole.member)):
        granted = authed_client.post(
            "/workspaces/ws-a/capabilities/evaluate",
            json={"permission": "projects.edit", "minRole": "member"},
        )
        denied = authed_client.post(
            "/workspaces/ws-a/capabilities/evaluate",
            json={"permission": "projects.edit", "minRole": "admin"},
        )

    assert granted.json() == {"decision": "granted", "render": True}
    assert denied.json() == {"decision": "denied", "render": False}


def test_evaluate_capability_non_member(authed_client: TestClient):
    with patch("routers.workspaces.resolve_actor", return_value=None):
        response = authed_client.post("/workspaces/ws-a/capabilities/evaluate", json={})

    assert response.json()["decision"] == "denied"


def test_read_permissions(as_actor):
    data = as_actor(AppRole.viewer).get("/workspaces/ws-a/permissions").json()
    assert data["role"] == "viewer"
    assert "projects.view" in data["permissions"]
    assert "projects.edit" not in data["permissions"]


def test_workspace_view_config(as_actor):
    client = as_actor(AppRole.member)
    with patch("routers.workspaces.get_workspace_discipline", return_value=Discipline.scenography):
        data = client.get("/workspaces/ws-a/view-config").json()

    assert data["discipline"] == "scenography"
    assert data["terminology"]["chantier"] == "Montage"


def test_workspace_view_config_without_discipline(as_actor):
    client = as_actor(AppRole.member)
    with patch("routers.workspaces.get_workspace_discipline", return_value=None):
        data = client.get("/workspaces/ws-a/view-config").json()

    assert data["discipline"] == "architecture"
