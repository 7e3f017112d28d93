# tests/test_session.py

"""
Tests for WorkspaceSession: explicit per-session state feeding the gates.
"""

from unittest.mock import patch

from core.errors import StorageError
from core.permission_helpers import build_actor
from models.capability import LOADING, CapabilityRequest
from models.enums import AppRole, CapabilityDecision, Discipline
from services.session import WorkspaceSession


def test_new_session_grants_nothing():
    session = WorkspaceSession(workspace_id="ws-a")

    assert session.is_module_enabled("projects") is False
    assert session.actor is LOADING
    assert session.evaluate_capability(CapabilityRequest()) == CapabilityDecision.indeterminate
    assert session.enabled_modules() == []


def test_session_resolves_views_for_its_discipline():
    session = WorkspaceSession(workspace_id="ws-a", discipline="scenographie")

    assert session.resolve_terminology().chantier == "Montage"
    assert "itinerance" in [b.key for b in session.resolve_blocks()]
    assert session.view_config().discipline == Discipline.scenography


def test_session_overrides_layer_on_top():
    session = WorkspaceSession(workspace_id="ws-a", discipline="architecture")
    session.set_overrides(
        terminology={"client": "Client"},
        views={"tabs": {"emails": {"visible": False}}},
        flags={"site_visit": False},
    )

    assert session.resolve_terminology().client == "Client"
    assert "emails" not in [t.key for t in session.resolve_tabs()]
    assert session.view_config().flags["site_visit"] is False


def test_switch_resets_workspace_scoped_state(catalog, enablements_a):
    session = WorkspaceSession(workspace_id="ws-a")
    session.set_modules(catalog)
    session.set_enablements(enablements_a)
    session.set_actor(build_actor(AppRole.admin))
    session.set_overrides(terminology={"client": "Client"})

    session.switch_workspace("ws-b", discipline="communication")

    assert session.modules == catalog
    assert session.enablements is None
    assert session.actor is LOADING
    assert session.terminology_overrides == {}
    assert session.is_module_enabled("crm") is False


def test_switch_to_same_workspace_keeps_state(catalog, enablements_a):
    session = WorkspaceSession(workspace_id="ws-a")
    session.set_enablements(enablements_a)
    session.switch_workspace("ws-a")
    assert session.enablements == enablements_a


def test_workspace_switch_check_redirects_once(catalog, enablements_a):
    session = WorkspaceSession(workspace_id="ws-a")
    session.set_modules(catalog)
    session.set_enablements(enablements_a)
    assert session.on_workspace_switch_check("/crm") is None

    session.switch_workspace("ws-b")
    # Enablements not loaded yet: guard stays armed
    assert session.on_workspace_switch_check("/crm") is None

    session.set_enablements([])
    signal = session.on_workspace_switch_check("/crm")
    assert signal is not None and signal.module_slug == "crm"

    assert session.on_workspace_switch_check("/crm") is None


def test_switch_and_back_between_checks_is_not_a_transition(catalog, enablements_a):
    session = WorkspaceSession(workspace_id="ws-a")
    session.set_modules(catalog)
    session.set_enablements(enablements_a)
    assert session.on_workspace_switch_check("/construction") is None

    session.switch_workspace("ws-b")
    session.switch_workspace("ws-a")
    session.set_enablements(enablements_a)

    # Identity is sampled at check time: ws-a then ws-a
    assert session.on_workspace_switch_check("/construction") is None
    assert session.guard.armed is False


def test_session_sub_nav_uses_enablements(catalog, enablements_a):
    session = WorkspaceSession(workspace_id="ws-a")
    session.set_modules(catalog)
    session.set_enablements(enablements_a)

    assert [i.key for i in session.filter_sub_nav("crm")][-1] == "tenders"
    assert "chantier" not in [i.key for i in session.filter_sub_nav("projects")]


def test_load_fills_every_input(catalog, enablements_a):
    actor = build_actor(AppRole.member)
    with patch("services.module_catalog.list_modules", return_value=catalog), \
         patch("services.workspace_modules.list_workspace_modules", return_value=enablements_a), \
         patch("services.actor_permissions.resolve_actor", return_value=actor), \
         patch("services.actor_permissions.get_workspace_discipline", return_value=Discipline.interior_design):
        session = WorkspaceSession(workspace_id="ws-a")
        assert session.load("user-1") is True

    assert session.is_module_enabled("crm") is True
    assert session.discipline == Discipline.interior_design
    assert session.evaluate_capability(CapabilityRequest(permission="projects.edit")) == CapabilityDecision.granted


def test_load_failure_leaves_input_unloaded(catalog):
    with patch("services.module_catalog.list_modules", return_value=catalog), \
         patch("services.workspace_modules.list_workspace_modules", side_effect=StorageError("List", "timeout")), \
         patch("services.actor_permissions.resolve_actor", side_effect=StorageError("Load", "timeout")), \
         patch("services.actor_permissions.get_workspace_discipline", return_value=None):
        session = WorkspaceSession(workspace_id="ws-a")
        assert session.load("user-1") is False

    assert session.enablements is None
    assert session.actor is LOADING
    assert session.is_module_enabled("crm") is False
    assert session.is_module_enabled("projects") is False
    assert session.evaluate_capability(CapabilityRequest()) == CapabilityDecision.indeterminate


def test_load_without_workspace_does_nothing():
    assert WorkspaceSession().load("user-1") is False


def test_failed_reload_drops_previously_loaded_inputs(catalog, enablements_a):
    actor = build_actor(AppRole.admin)
    with patch("services.module_catalog.list_modules", return_value=catalog), \
         patch("services.workspace_modules.list_workspace_modules", return_value=enablements_a), \
         patch("services.actor_permissions.resolve_actor", return_value=actor), \
         patch("services.actor_permissions.get_workspace_discipline", return_value=Discipline.scenography):
        session = WorkspaceSession(workspace_id="ws-a")
        assert session.load("user-1") is True
    assert session.is_module_enabled("crm") is True

    with patch("services.module_catalog.list_modules", side_effect=StorageError("List", "timeout")), \
         patch("services.workspace_modules.list_workspace_modules", side_effect=StorageError("List", "timeout")), \
         patch("services.actor_permissions.resolve_actor", side_effect=StorageError("Load", "timeout")), \
         patch("services.actor_permissions.get_workspace_discipline", side_effect=StorageError("Load", "timeout")):
        assert session.load("user-1") is False

    assert session.modules is None
    assert session.enablements is None
    assert session.actor is LOADING
    assert session.discipline is None
    assert session.is_module_enabled("crm") is False
    assert session.evaluate_capability(CapabilityRequest(permission="projects.view")) == CapabilityDecision.indeterminate
