# core/permission_helpers.py

from typing import Iterable, List, Optional, Union

from fastapi import Depends, HTTPException
from pydantic import ValidationError

from core.logging_config import logger
from core.permissions import ALL_PERMISSIONS, default_permissions_for_role
from core.roles import has_min_role, normalize_role
from models.capability import (
    ActorPermissions,
    ActorState,
    CapabilityRequest,
    PermissionsLoading,
    RolePermissionOverride,
)
from models.enums import AppRole, CapabilityDecision


# -----------------------------------------------------
# Effective permissions:
#   • default matrix for the role
#   • workspace override rows (role, permission_code, granted)
#   • owner always holds everything
# -----------------------------------------------------
def get_effective_permissions(
    role: Union[str, AppRole, None],
    overrides: Optional[Iterable[Union[RolePermissionOverride, dict]]] = None,
) -> frozenset:
    app_role = normalize_role(role)
    if app_role is None:
        return frozenset()

    if app_role == AppRole.owner:
        return ALL_PERMISSIONS

    effective = set(default_permissions_for_role(app_role))

    for raw in overrides or []:
        try:
            override = raw if isinstance(raw, RolePermissionOverride) else RolePermissionOverride.model_validate(raw)
        except ValidationError as e:
            logger.warning(f"Skipping malformed permission override {raw!r}: {e.errors()}")
            continue
        if override.role != app_role or override.permission_code not in ALL_PERMISSIONS:
            continue
        if override.granted:
            effective.add(override.permission_code)
        else:
            effective.discard(override.permission_code)

    return frozenset(effective)


def build_actor(
    role: Union[str, AppRole],
    overrides: Optional[Iterable[Union[RolePermissionOverride, dict]]] = None,
) -> ActorPermissions:
    return ActorPermissions(role=role, permissions=get_effective_permissions(role, overrides))


# -----------------------------------------------------
# Gate evaluation
# -----------------------------------------------------
def evaluate(request: CapabilityRequest, actor: ActorPermissions) -> bool:
    """
    Conjunction of the four clauses; an absent clause is vacuously true.

      permission      → actor holds it
      permissions     → actor holds every one (empty list is vacuous)
      any_permission  → actor holds at least one (empty list is vacuous)
      min_role        → actor ranks at least min_role
    """
    if request.permission and not actor.has(request.permission):
        return False

    if request.permissions and not all(actor.has(p) for p in request.permissions):
        return False

    if request.any_permission and not any(actor.has(p) for p in request.any_permission):
        return False

    return has_min_role(actor.role, request.min_role)


def evaluate_capability(
    request: CapabilityRequest,
    actor_state: Optional[ActorState],
) -> CapabilityDecision:
    """
    granted / denied, or indeterminate while the actor is still loading.

    None means "resolved, not a member" and is denied.
    """
    if isinstance(actor_state, PermissionsLoading):
        return CapabilityDecision.indeterminate
    if actor_state is None:
        return CapabilityDecision.denied
    return CapabilityDecision.granted if evaluate(request, actor_state) else CapabilityDecision.denied


def should_render(decision: CapabilityDecision) -> bool:
    """Only a granted decision renders the gated content."""
    return decision == CapabilityDecision.granted


def missing_permissions(request: CapabilityRequest, actor: ActorPermissions) -> List[str]:
    """Codes from `permission`/`permissions` the actor lacks (for error details)."""
    wanted = ([request.permission] if request.permission else []) + list(request.permissions)
    return [p for p in wanted if not actor.has(p)]


# -----------------------------------------------------
# FastAPI dependency wrapper
# -----------------------------------------------------
def requires_capability(
    permission: Optional[str] = None,
    permissions: Optional[List[str]] = None,
    any_permission: Optional[List[str]] = None,
    min_role: Optional[AppRole] = None,
):
    """
    Usage:
        @router.post("/...", dependencies=[Depends(requires_capability("settings.manage_modules"))])

    Must be used on routes with a `{workspace_id}` path parameter.
    """
    from dependencies.auth import get_workspace_actor

    request = CapabilityRequest(
        permission=permission,
        permissions=permissions or [],
        any_permission=any_permission or [],
        min_role=min_role,
    )

    def dependency(actor: ActorPermissions = Depends(get_workspace_actor)) -> ActorPermissions:
        decision = evaluate_capability(request, actor)
        if not should_render(decision):
            logger.warning(
                f"Capability denied for role={actor.role} "
                f"(missing={missing_permissions(request, actor)}, min_role={request.min_role})"
            )
            raise HTTPException(
                status_code=403,
                detail="Insufficient permissions for this workspace",
            )
        return actor

    return dependency
