# services/session.py

"""
Per-session workspace state.

Holds everything the gates and resolvers read for one user session: the
active workspace, its discipline, the module catalog, the workspace's
enablement rows and the actor's permissions. Each input has an explicit
"not loaded" state (None, or LOADING for the actor) distinct from "loaded
and empty"; gates grant nothing while an input is not loaded.

Workspace identity changes go through `switch_workspace()`. The
workspace-switch guard samples that identity only when
`on_workspace_switch_check()` runs, so a switch that returns to the same
workspace between two checks is not a transition.
"""

from threading import RLock
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from core import modules as module_gate
from core import view_config
from core.errors import StorageError
from core.logging_config import logger
from core.permission_helpers import evaluate_capability
from core.subnav import SUB_NAV_MODULE_REQUIREMENTS, default_sub_nav, filter_sub_nav
from core.terminology import resolve_terminology
from models.capability import LOADING, ActorState, CapabilityRequest
from models.discipline import Terminology, ViewConfig
from models.enums import CapabilityDecision, Discipline
from models.module import Module, RedirectSignal, WorkspaceModule
from models.navigation import SubNavItem


class WorkspaceSession:

    def __init__(
        self,
        workspace_id: Optional[str] = None,
        discipline: Union[str, Discipline, None] = None,
    ):
        self._lock = RLock()
        self.guard = module_gate.WorkspaceSwitchGuard()

        self.workspace_id: Optional[str] = workspace_id
        self.discipline: Union[str, Discipline, None] = discipline

        # Global catalog survives workspace switches
        self.modules: Optional[List[Module]] = None
        self.enablements: Optional[List[WorkspaceModule]] = None
        self.actor: Optional[ActorState] = LOADING

        # Workspace-level layers on top of the discipline defaults
        self.terminology_overrides: Dict[str, str] = {}
        self.view_overrides: Dict[str, Dict[str, Any]] = {}
        self.flag_overrides: Dict[str, Any] = {}

    # =========================================================
    # State updates
    # =========================================================
    def switch_workspace(
        self,
        workspace_id: Optional[str],
        discipline: Union[str, Discipline, None] = None,
    ):
        """Change the active workspace; workspace-scoped inputs go back to "not loaded"."""
        with self._lock:
            if workspace_id == self.workspace_id:
                return
            self.workspace_id = workspace_id
            self.discipline = discipline
            self.enablements = None
            self.actor = LOADING
            self.terminology_overrides = {}
            self.view_overrides = {}
            self.flag_overrides = {}

    def set_modules(self, modules: Optional[Sequence[Module]]):
        with self._lock:
            self.modules = list(modules) if modules is not None else None

    def set_enablements(self, enablements: Optional[Sequence[WorkspaceModule]]):
        with self._lock:
            self.enablements = list(enablements) if enablements is not None else None

    def set_actor(self, actor: Optional[ActorState]):
        with self._lock:
            self.actor = actor

    def set_overrides(
        self,
        terminology: Optional[Mapping[str, str]] = None,
        views: Optional[Mapping[str, Mapping[str, Any]]] = None,
        flags: Optional[Mapping[str, Any]] = None,
    ):
        with self._lock:
            self.terminology_overrides = dict(terminology or {})
            self.view_overrides = {kind: dict(o) for kind, o in (views or {}).items()}
            self.flag_overrides = dict(flags or {})

    def load(self, user_id: str) -> bool:
        """
        Fetch every input for the active workspace from the providers.

        A failed fetch resets that input to "not loaded" (logged), even when an
        earlier load filled it; the gates then grant nothing for it.

        Returns:
            True when every input loaded
        """
        from services.actor_permissions import get_workspace_discipline, resolve_actor
        from services.module_catalog import list_modules
        from services.workspace_modules import list_workspace_modules

        workspace_id = self.workspace_id
        if workspace_id is None:
            return False

        complete = True

        try:
            self.set_modules(list_modules())
        except StorageError as e:
            logger.warning(f"Module catalog not loaded: {e}")
            self.set_modules(None)
            complete = False

        try:
            self.set_enablements(list_workspace_modules(workspace_id))
        except StorageError as e:
            logger.warning(f"Enablements for workspace {workspace_id} not loaded: {e}")
            self.set_enablements(None)
            complete = False

        try:
            self.set_actor(resolve_actor(user_id, workspace_id))
        except StorageError as e:
            logger.warning(f"Permissions for user {user_id} in {workspace_id} not loaded: {e}")
            self.set_actor(LOADING)
            complete = False

        try:
            discipline = get_workspace_discipline(workspace_id)
            with self._lock:
                self.discipline = discipline
        except StorageError as e:
            logger.warning(f"Discipline for workspace {workspace_id} not loaded: {e}")
            with self._lock:
                self.discipline = None
            complete = False

        return complete

    # =========================================================
    # Terminology / views
    # =========================================================
    def resolve_terminology(self) -> Terminology:
        return resolve_terminology(self.discipline, self.terminology_overrides)

    def resolve_tabs(self):
        return view_config.resolve_tabs(self.discipline, self.view_overrides.get("tabs"))

    def resolve_blocks(self):
        return view_config.resolve_blocks(self.discipline, self.view_overrides.get("synthesis_blocks"))

    def resolve_sections(self):
        return view_config.resolve_sections(self.discipline, self.view_overrides.get("form_sections"))

    def view_config(self) -> ViewConfig:
        return view_config.get_view_config(
            self.discipline,
            view_overrides=self.view_overrides,
            terminology_overrides=self.terminology_overrides,
            flag_overrides=self.flag_overrides,
        )

    # =========================================================
    # Modules
    # =========================================================
    def is_module_enabled(self, slug: str) -> bool:
        return module_gate.is_module_enabled(slug, self.modules, self.enablements)

    def enabled_modules(self) -> List[str]:
        return module_gate.enabled_module_slugs(self.modules, self.enablements)

    def on_workspace_switch_check(self, path: Optional[str]) -> Optional[RedirectSignal]:
        """Feed the current identity and path to the guard; may return a redirect."""
        with self._lock:
            return self.guard.observe(self.workspace_id, path, self.modules, self.enablements)

    # =========================================================
    # Permissions
    # =========================================================
    def evaluate_capability(self, request: CapabilityRequest) -> CapabilityDecision:
        return evaluate_capability(request, self.actor)

    # =========================================================
    # Sub-navigation
    # =========================================================
    def filter_sub_nav(
        self,
        module_slug: str,
        items: Optional[Sequence[SubNavItem]] = None,
    ) -> List[SubNavItem]:
        if items is None:
            items = default_sub_nav(module_slug)
        return filter_sub_nav(module_slug, items, SUB_NAV_MODULE_REQUIREMENTS, self.is_module_enabled)
