# routers/modules.py

from typing import List, Tuple

from fastapi import APIRouter, Depends, HTTPException

from core.errors import StorageError, handle_supabase_error
from core.modules import is_module_enabled
from core.permission_helpers import requires_capability
from dependencies.auth import get_workspace_actor
from models.capability import ActorPermissions
from models.module import Module, ModuleRead, WorkspaceModule
from services.module_catalog import list_modules
from services.workspace_modules import disable_module, enable_module, list_workspace_modules


router = APIRouter(
    prefix="/workspaces",
    tags=["Modules"],
)


def load_module_inputs(workspace_id: str) -> Tuple[List[Module], List[WorkspaceModule]]:
    """Catalog + enablement rows, or an HTTP error when storage fails."""
    try:
        return list_modules(), list_workspace_modules(workspace_id)
    except StorageError as e:
        raise handle_supabase_error(e, "Failed to load workspace modules")


# -----------------------------------------------------
# GET /workspaces/{workspace_id}/modules
# -----------------------------------------------------
@router.get("/{workspace_id}/modules", response_model=List[ModuleRead])
def list_modules_for_workspace(
    workspace_id: str,
    actor: ActorPermissions = Depends(get_workspace_actor),
):
    modules, enablements = load_module_inputs(workspace_id)
    return [
        ModuleRead(
            slug=m.slug,
            name=m.name,
            is_core=m.is_core,
            enabled=is_module_enabled(m.slug, modules, enablements),
        )
        for m in modules
    ]


# -----------------------------------------------------
# POST /workspaces/{workspace_id}/modules/{slug}
# -----------------------------------------------------
@router.post(
    "/{workspace_id}/modules/{slug}",
    response_model=ModuleRead,
    dependencies=[Depends(requires_capability("settings.manage_modules"))],
)
def enable_workspace_module(workspace_id: str, slug: str):
    try:
        enable_module(workspace_id, slug)
    except ValueError as e:
        raise HTTPException(400, str(e))
    except StorageError as e:
        raise handle_supabase_error(e, "Failed to enable module")

    return ModuleRead(slug=slug, is_core=False, enabled=True)


# -----------------------------------------------------
# DELETE /workspaces/{workspace_id}/modules/{slug}
# -----------------------------------------------------
@router.delete(
    "/{workspace_id}/modules/{slug}",
    response_model=ModuleRead,
    dependencies=[Depends(requires_capability("settings.manage_modules"))],
)
def disable_workspace_module(workspace_id: str, slug: str):
    try:
        disable_module(workspace_id, slug)
    except ValueError as e:
        raise HTTPException(400, str(e))
    except StorageError as e:
        raise handle_supabase_error(e, "Failed to disable module")

    return ModuleRead(slug=slug, is_core=False, enabled=False)
