# services/actor_permissions.py

from typing import Optional

from core.disciplines import normalize_discipline
from core.errors import StorageError, storage_error
from core.logging_config import logger
from core.permission_helpers import build_actor
from core.roles import normalize_role
from core.supabase_client import get_supabase_client
from models.capability import ActorPermissions
from models.enums import Discipline


def _client():
    client = get_supabase_client()
    if client is None:
        raise StorageError("Workspace membership", "Supabase client not configured")
    return client


# -----------------------------------------------------
# Actor = member role + workspace permission overrides
# -----------------------------------------------------
def resolve_actor(user_id: str, workspace_id: str) -> Optional[ActorPermissions]:
    """
    Resolve the caller's effective permissions in one workspace.

    Returns:
        ActorPermissions, or None when the user is not a member
        (or holds a role this service does not know)

    Raises:
        StorageError: never degraded into a grant
    """
    client = _client()

    try:
        member = (
            client.table("workspace_members")
            .select("role")
            .eq("workspace_id", workspace_id)
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
    except Exception as e:
        raise storage_error(e, "Load workspace membership") from e

    if not member.data:
        return None

    role = normalize_role(member.data[0].get("role"))
    if role is None:
        logger.warning(
            f"Unknown role {member.data[0].get('role')!r} for user {user_id} in workspace {workspace_id}"
        )
        return None

    try:
        overrides = (
            client.table("workspace_role_permissions")
            .select("role, permission_code, granted")
            .eq("workspace_id", workspace_id)
            .eq("role", role.value)
            .execute()
        )
    except Exception as e:
        raise storage_error(e, "Load role permission overrides") from e

    return build_actor(role, overrides.data or [])


# -----------------------------------------------------
# Discipline of a workspace
# -----------------------------------------------------
def get_workspace_discipline(workspace_id: str) -> Optional[Discipline]:
    """
    Discipline configured for the workspace; None when unset or unknown
    (callers fall back to the default discipline).
    """
    client = _client()

    try:
        result = (
            client.table("workspaces")
            .select("id, discipline:disciplines(code)")
            .eq("id", workspace_id)
            .limit(1)
            .execute()
        )
    except Exception as e:
        raise storage_error(e, "Load workspace discipline") from e

    if not result.data:
        return None

    discipline = result.data[0].get("discipline") or {}
    return normalize_discipline(discipline.get("code"))
