from enum import Enum


class BaseStrEnum(str, Enum):
    """
    Base enum that serializes cleanly to a string
    and provides a .list() method for UI dropdowns.
    """

    def __str__(self):
        return str(self.value)

    @classmethod
    def list(cls):
        return [item.value for item in cls]


# -----------------------------------------------------
# DISCIPLINE
# -----------------------------------------------------
class Discipline(BaseStrEnum):
    """Business vertical of a workspace. Drives terminology and visible views."""

    architecture = "architecture"
    interior_design = "interior_design"
    scenography = "scenography"
    communication = "communication"


# -----------------------------------------------------
# APP ROLE (ordered, lowest first)
# -----------------------------------------------------
class AppRole(BaseStrEnum):
    """Workspace member role. Declaration order is rank order."""

    viewer = "viewer"
    member = "member"
    admin = "admin"
    owner = "owner"


# -----------------------------------------------------
# VIEW KIND
# -----------------------------------------------------
class ViewKind(BaseStrEnum):
    """The three lists of view definitions a discipline declares."""

    tabs = "tabs"
    synthesis_blocks = "synthesis_blocks"
    form_sections = "form_sections"


# -----------------------------------------------------
# CAPABILITY DECISION
# -----------------------------------------------------
class CapabilityDecision(BaseStrEnum):
    """Outcome of a permission gate. Only `granted` renders content."""

    granted = "granted"
    denied = "denied"
    indeterminate = "indeterminate"
