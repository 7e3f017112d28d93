# routers/workspaces.py

from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from core.errors import StorageError, handle_supabase_error
from core.permission_helpers import evaluate_capability, should_render
from core.view_config import get_view_config
from dependencies.auth import CurrentUser, get_current_user, get_workspace_actor
from models.capability import ActorPermissions, CapabilityRequest, CapabilityResponse
from models.discipline import ViewConfigRead
from models.enums import AppRole
from services.actor_permissions import get_workspace_discipline, resolve_actor


router = APIRouter(
    prefix="/workspaces",
    tags=["Workspaces"],
)


class WorkspacePermissionsRead(BaseModel):
    role: AppRole
    permissions: List[str]


# -----------------------------------------------------
# POST /workspaces/{workspace_id}/capabilities/evaluate
# Non-members get a "denied" decision rather than 403
# -----------------------------------------------------
@router.post("/{workspace_id}/capabilities/evaluate", response_model=CapabilityResponse)
def evaluate_workspace_capability(
    workspace_id: str,
    payload: CapabilityRequest,
    current_user: CurrentUser = Depends(get_current_user),
):
    try:
        actor = resolve_actor(current_user.id, workspace_id)
    except StorageError as e:
        raise handle_supabase_error(e, "Failed to resolve workspace permissions")

    decision = evaluate_capability(payload, actor)
    return CapabilityResponse(decision=decision, render=should_render(decision))


# -----------------------------------------------------
# GET /workspaces/{workspace_id}/permissions
# -----------------------------------------------------
@router.get("/{workspace_id}/permissions", response_model=WorkspacePermissionsRead)
def read_workspace_permissions(
    workspace_id: str,
    actor: ActorPermissions = Depends(get_workspace_actor),
):
    return WorkspacePermissionsRead(role=actor.role, permissions=sorted(actor.permissions))


# -----------------------------------------------------
# GET /workspaces/{workspace_id}/view-config
# Terminology + resolved views for the workspace's discipline
# -----------------------------------------------------
@router.get("/{workspace_id}/view-config", response_model=ViewConfigRead)
def read_workspace_view_config(
    workspace_id: str,
    actor: ActorPermissions = Depends(get_workspace_actor),
):
    try:
        discipline = get_workspace_discipline(workspace_id)
    except StorageError as e:
        raise handle_supabase_error(e, "Failed to load workspace discipline")

    return ViewConfigRead.from_config(get_view_config(discipline))
