# -------------------------
# Enums
# -------------------------
from .enums import (
    AppRole,
    CapabilityDecision,
    Discipline,
    ViewKind,
)

# -------------------------
# View Definitions
# -------------------------
from .view_definition import (
    SectionDef,
    SynthesisBlockDef,
    TabDef,
    ViewDefinition,
    ViewDefinitionRead,
    ViewOverride,
)

# -------------------------
# Discipline Models
# -------------------------
from .discipline import (
    DisciplineDefinition,
    DisciplineOption,
    DisciplinePhase,
    DisciplineProjectType,
    Terminology,
    ViewConfig,
    ViewConfigRead,
)

# -------------------------
# Module Models
# -------------------------
from .module import (
    Module,
    ModuleRead,
    NavigationCheckRequest,
    NavigationCheckResponse,
    RedirectSignal,
    WorkspaceModule,
)

# -------------------------
# Capability Models
# -------------------------
from .capability import (
    LOADING,
    ActorPermissions,
    CapabilityRequest,
    CapabilityResponse,
    PermissionsLoading,
    RolePermissionOverride,
)

# -------------------------
# Navigation
# -------------------------
from .navigation import SubNavItem
