# core/modules.py

"""
Module entitlement gate.

A module is usable in a workspace when it is a core module, or when the
workspace has an enablement row for it. The gate also owns the
workspace-switch guard: after the active workspace changes, the current
path is checked once against the new workspace's modules.
"""

from typing import Dict, Iterable, List, Optional
from urllib.parse import urlsplit

from core.logging_config import logger
from models.module import Module, RedirectSignal, WorkspaceModule


# ============================================================
# Entitlement
# ============================================================
def is_module_enabled(
    slug: str,
    all_modules: Optional[Iterable[Module]],
    workspace_enablements: Optional[Iterable[WorkspaceModule]],
) -> bool:
    """
    Args:
        slug: module slug
        all_modules: global module catalog (None → not loaded)
        workspace_enablements: the workspace's enablement rows (None → not loaded)

    Returns:
        True for core modules and for modules the workspace enabled.
        Unknown slugs and unloaded inputs return False.
    """
    if all_modules is None or workspace_enablements is None:
        return False

    module = next((m for m in all_modules if m.slug == slug), None)
    if module is None:
        return False
    if module.is_core:
        return True

    return any(e.module_slug == module.slug for e in workspace_enablements)


def enabled_module_slugs(
    all_modules: Optional[Iterable[Module]],
    workspace_enablements: Optional[Iterable[WorkspaceModule]],
) -> List[str]:
    """Slugs usable in the workspace, in catalog order."""
    if all_modules is None or workspace_enablements is None:
        return []

    modules = list(all_modules)
    enablements = list(workspace_enablements)
    return [m.slug for m in modules if is_module_enabled(m.slug, modules, enablements)]


# ============================================================
# Path → module table
# ============================================================
MODULE_PATHS: Dict[str, str] = {
    "/dashboard": "dashboard",
    "/settings": "settings",
    "/projects": "projects",
    "/tasks": "tasks",
    "/crm": "crm",
    "/documents": "documents",
    "/tenders": "tenders",
    "/commercial": "commercial",
    "/invoicing": "commercial",
    "/chantier": "construction",
    "/construction": "construction",
    "/time-tracking": "time-tracking",
    "/resources": "resources",
    "/team": "resources",
    "/calendar": "calendar",
    "/references": "references",
    "/objects": "objects",
    "/campaigns": "campaigns",
    "/media-planning": "media-planning",
}

# Paths mapped to these are always allowed
UNGATED_MODULES = {"dashboard", "settings"}


def _normalize_path(path: Optional[str]) -> str:
    if not path:
        return "/"
    clean = urlsplit(path).path or "/"
    if len(clean) > 1:
        clean = clean.rstrip("/")
    return clean or "/"


def module_for_path(path: Optional[str]) -> Optional[str]:
    """
    Module slug implied by a navigation path; None for "/" and unmapped paths.

    Prefixes match whole segments ("/crm" matches "/crm/leads" but not
    "/crmx"); the longest matching prefix wins.
    """
    clean = _normalize_path(path)
    best = None
    for prefix in MODULE_PATHS:
        if clean == prefix or clean.startswith(prefix + "/"):
            if best is None or len(prefix) > len(best):
                best = prefix
    return MODULE_PATHS[best] if best else None


# ============================================================
# Workspace-switch guard
# ============================================================
class WorkspaceSwitchGuard:
    """
    Two states: idle, or armed after a workspace switch.

    Arms only when the workspace identity goes from one non-null value to a
    different non-null value. While armed, nothing happens until both module
    inputs are loaded; then the current path is evaluated exactly once and
    the guard returns to idle.

    One guard per session; callers feed observations in order.
    """

    IDLE = "idle"
    ARMED = "armed_after_workspace_switch"

    def __init__(self):
        self._previous_workspace_id: Optional[str] = None
        self.state = self.IDLE

    @property
    def armed(self) -> bool:
        return self.state == self.ARMED

    def reset(self):
        self._previous_workspace_id = None
        self.state = self.IDLE

    def observe(
        self,
        workspace_id: Optional[str],
        path: Optional[str],
        all_modules: Optional[Iterable[Module]],
        workspace_enablements: Optional[Iterable[WorkspaceModule]],
    ) -> Optional[RedirectSignal]:
        previous = self._previous_workspace_id
        self._previous_workspace_id = workspace_id

        if workspace_id is None:
            self.state = self.IDLE
            return None

        if previous is not None and workspace_id != previous:
            logger.debug(f"Workspace switch {previous} → {workspace_id}, guard armed")
            self.state = self.ARMED

        if not self.armed:
            return None

        # Inputs incomplete: stay armed, never default to deny
        if all_modules is None or workspace_enablements is None:
            return None

        self.state = self.IDLE
        return self._evaluate(path, all_modules, workspace_enablements)

    def _evaluate(self, path, all_modules, workspace_enablements) -> Optional[RedirectSignal]:
        module_slug = module_for_path(path)
        if module_slug is None or module_slug in UNGATED_MODULES:
            return None

        if is_module_enabled(module_slug, all_modules, workspace_enablements):
            return None

        logger.info(f"Module '{module_slug}' disabled in new workspace, redirecting {path} → /")
        return RedirectSignal(target="/", module_slug=module_slug)
