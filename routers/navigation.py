# routers/navigation.py

from typing import List

from fastapi import APIRouter, Depends

from core.logging_config import logger
from dependencies.auth import get_workspace_actor
from models.capability import ActorPermissions
from models.module import NavigationCheckRequest, NavigationCheckResponse
from models.navigation import SubNavItem
from routers.modules import load_module_inputs
from services.session import WorkspaceSession


router = APIRouter(
    prefix="/workspaces",
    tags=["Navigation"],
)


# -----------------------------------------------------
# POST /workspaces/{workspace_id}/navigation/check
# Called by the front end right after a workspace switch.
# -----------------------------------------------------
@router.post("/{workspace_id}/navigation/check", response_model=NavigationCheckResponse)
def check_navigation(
    workspace_id: str,
    payload: NavigationCheckRequest,
    actor: ActorPermissions = Depends(get_workspace_actor),
):
    """
    Replays the switch (previous → current workspace) through a fresh
    session so the guard sees the transition. Returns a redirect signal when
    the current path belongs to a module the new workspace has not enabled.
    """
    session = WorkspaceSession(workspace_id=payload.previous_workspace_id)
    session.on_workspace_switch_check(payload.path)

    session.switch_workspace(workspace_id)
    modules, enablements = load_module_inputs(workspace_id)
    session.set_modules(modules)
    session.set_enablements(enablements)

    redirect = session.on_workspace_switch_check(payload.path)
    if redirect:
        logger.info(f"Workspace {workspace_id}: {payload.path} → {redirect.target} ({redirect.module_slug})")

    return NavigationCheckResponse(redirect=redirect)


# -----------------------------------------------------
# GET /workspaces/{workspace_id}/navigation/{module_slug}/sub-nav
# -----------------------------------------------------
@router.get("/{workspace_id}/navigation/{module_slug}/sub-nav", response_model=List[SubNavItem])
def read_sub_nav(
    workspace_id: str,
    module_slug: str,
    actor: ActorPermissions = Depends(get_workspace_actor),
):
    modules, enablements = load_module_inputs(workspace_id)

    session = WorkspaceSession(workspace_id=workspace_id)
    session.set_modules(modules)
    session.set_enablements(enablements)

    return session.filter_sub_nav(module_slug)
