# services/workspace_modules.py

from typing import List

from core.errors import StorageError, storage_error
from core.logging_config import logger
from core.supabase_client import get_supabase_client
from models.module import WorkspaceModule
from services.module_catalog import get_module


def _client():
    client = get_supabase_client()
    if client is None:
        raise StorageError("Workspace modules", "Supabase client not configured")
    return client


def _to_workspace_module(row: dict):
    # Slug comes from the embedded `modules` row
    module = row.get("module") or {}
    slug = module.get("slug") or row.get("module_slug")
    if not slug:
        return None
    return WorkspaceModule(
        id=row.get("id"),
        workspace_id=row["workspace_id"],
        module_slug=slug,
        enabled_at=row.get("enabled_at"),
    )


# -----------------------------------------------------
# LIST enablement rows for a workspace
# -----------------------------------------------------
def list_workspace_modules(workspace_id: str) -> List[WorkspaceModule]:
    """
    Enablement rows of one workspace. Never cached: admins toggle modules
    and the next workspace switch must see the change.

    Raises:
        StorageError
    """
    client = _client()
    try:
        result = (
            client.table("workspace_modules")
            .select("id, workspace_id, module_id, enabled_at, module:modules(slug)")
            .eq("workspace_id", workspace_id)
            .execute()
        )
    except Exception as e:
        raise storage_error(e, "List workspace modules") from e

    rows = [_to_workspace_module(row) for row in (result.data or [])]
    return [r for r in rows if r is not None]


# -----------------------------------------------------
# ENABLE / DISABLE
# -----------------------------------------------------
def _toggleable_module(slug: str):
    module = get_module(slug)
    if module is None:
        raise ValueError(f"Unknown module '{slug}'")
    if module.is_core:
        raise ValueError(f"Core module '{slug}' is always enabled")
    return module


def enable_module(workspace_id: str, slug: str) -> WorkspaceModule:
    """
    Raises:
        ValueError: unknown or core module
        StorageError
    """
    module = _toggleable_module(slug)
    client = _client()

    try:
        result = (
            client.table("workspace_modules")
            .upsert(
                {"workspace_id": workspace_id, "module_id": module.id},
                on_conflict="workspace_id,module_id",
            )
            .execute()
        )
    except Exception as e:
        raise storage_error(e, "Enable module") from e

    logger.info(f"Module '{slug}' enabled for workspace {workspace_id}")

    row = (result.data or [{}])[0]
    return WorkspaceModule(
        id=row.get("id"),
        workspace_id=workspace_id,
        module_slug=slug,
        enabled_at=row.get("enabled_at"),
    )


def disable_module(workspace_id: str, slug: str) -> bool:
    """
    Returns:
        True when an enablement row was removed

    Raises:
        ValueError: unknown or core module
        StorageError
    """
    module = _toggleable_module(slug)
    client = _client()

    try:
        result = (
            client.table("workspace_modules")
            .delete()
            .eq("workspace_id", workspace_id)
            .eq("module_id", module.id)
            .execute()
        )
    except Exception as e:
        raise storage_error(e, "Disable module") from e

    removed = bool(result.data)
    logger.info(f"Module '{slug}' disabled for workspace {workspace_id} (removed={removed})")
    return removed
