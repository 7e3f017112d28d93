# models/view_definition.py

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from core.icons import lookup_icon


# -------------------------------------------------
# Shared fields
# -------------------------------------------------
class ViewDefinition(BaseModel):
    """
    One entry of a discipline's tab / synthesis block / form section list.

    Declared statically per discipline and never mutated: overrides produce
    new instances via `model_copy(update=...)`.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    icon: Optional[str] = None
    visible: bool = True
    order: int = 0

    @property
    def icon_ref(self) -> str:
        """Resolved icon reference (fallback icon when unknown)."""
        return lookup_icon(self.icon)


# -------------------------------------------------
# Tab
# -------------------------------------------------
class TabDef(ViewDefinition):
    component: Optional[str] = None


# -------------------------------------------------
# Synthesis block
# -------------------------------------------------
class SynthesisBlockDef(ViewDefinition):
    component: Optional[str] = None


# -------------------------------------------------
# Form section
# -------------------------------------------------
class SectionDef(ViewDefinition):
    fields: List[str] = Field(default_factory=list)


# -------------------------------------------------
# Read (engine → API response)
# -------------------------------------------------
class ViewDefinitionRead(BaseModel):
    key: str
    label: str
    icon: str
    order: int
    component: Optional[str] = None
    fields: List[str] = Field(default_factory=list)

    @classmethod
    def from_definition(cls, definition: ViewDefinition) -> "ViewDefinitionRead":
        return cls(
            key=definition.key,
            label=definition.label,
            icon=definition.icon_ref,
            order=definition.order,
            component=getattr(definition, "component", None),
            fields=list(getattr(definition, "fields", [])),
        )


# -------------------------------------------------
# Workspace override for one definition key
# -------------------------------------------------
class ViewOverride(BaseModel):
    """Field-by-field override; None means "keep the base value"."""

    visible: Optional[bool] = None
    order: Optional[int] = None
    label: Optional[str] = None
