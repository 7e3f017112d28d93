# models/capability.py

from typing import FrozenSet, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from models.enums import AppRole, CapabilityDecision


# -------------------------------------------------
# Capability request
# -------------------------------------------------
class CapabilityRequest(BaseModel):
    """
    Conjunction of up to four clauses; absent clauses are vacuous.

    Accepts both snake_case and the front end's camelCase keys
    (`anyPermission`, `minRole`).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    permission: Optional[str] = None
    permissions: List[str] = Field(default_factory=list)
    any_permission: List[str] = Field(default_factory=list, alias="anyPermission")
    min_role: Optional[AppRole] = Field(None, alias="minRole")


# -------------------------------------------------
# Actor (resolved permissions for one workspace)
# -------------------------------------------------
class ActorPermissions(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: AppRole
    permissions: FrozenSet[str] = frozenset()

    def has(self, permission: str) -> bool:
        return permission in self.permissions


class PermissionsLoading:
    """Sentinel: the actor's permissions are still being fetched."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "LOADING"

    def __bool__(self):
        return False


LOADING = PermissionsLoading()

ActorState = Union[ActorPermissions, PermissionsLoading]


class CapabilityResponse(BaseModel):
    decision: CapabilityDecision
    render: bool


# -------------------------------------------------
# Workspace override of the default permission matrix
# -------------------------------------------------
class RolePermissionOverride(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: AppRole
    permission_code: str
    granted: bool
