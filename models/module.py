# models/module.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator


# -------------------------------------------------
# Module (global catalog row)
# -------------------------------------------------
class Module(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    is_core: bool = False

    # Display metadata, irrelevant to gating
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    category: Optional[str] = None
    sort_order: Optional[int] = None

    @field_validator("is_core", mode="before")
    @classmethod
    def normalize_is_core(cls, v):
        # NULL column → not core
        return bool(v)


# -------------------------------------------------
# Workspace ↔ module enablement row
# -------------------------------------------------
class WorkspaceModule(BaseModel):
    model_config = ConfigDict(frozen=True)

    workspace_id: str
    module_slug: str
    id: Optional[str] = None
    enabled_at: Optional[datetime] = None

    @field_validator("enabled_at", mode="before")
    @classmethod
    def normalize_enabled_at(cls, v):
        if isinstance(v, str) and v.endswith("Z"):
            return v.replace("Z", "+00:00")
        return v


# -------------------------------------------------
# Read (API response)
# -------------------------------------------------
class ModuleRead(BaseModel):
    slug: str
    name: Optional[str] = None
    is_core: bool
    enabled: bool


class RedirectSignal(BaseModel):
    """Emitted by the workspace-switch guard when the current path is no longer allowed."""

    model_config = ConfigDict(frozen=True)

    target: str = "/"
    module_slug: str
    reason: str = "module_disabled"


class NavigationCheckRequest(BaseModel):
    previous_workspace_id: Optional[str] = None
    path: str


class NavigationCheckResponse(BaseModel):
    redirect: Optional[RedirectSignal] = None
