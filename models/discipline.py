# models/discipline.py

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from models.enums import Discipline
from models.view_definition import SectionDef, SynthesisBlockDef, TabDef, ViewDefinitionRead


# -------------------------------------------------
# Terminology (every key required → never partial)
# -------------------------------------------------
class Terminology(BaseModel):
    model_config = ConfigDict(frozen=True)

    project: str
    projects: str
    phase: str
    phases: str
    lot: str
    lots: str
    chantier: str
    client: str
    clients: str
    intervenant: str
    intervenants: str
    dce: str
    devis: str
    contrat: str
    budget: str
    surface: str


TERMINOLOGY_KEYS = tuple(Terminology.model_fields.keys())


# -------------------------------------------------
# Project phases / types
# -------------------------------------------------
class DisciplinePhase(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    description: Optional[str] = None
    percentage: Optional[float] = None


class DisciplineProjectType(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    label: str
    description: str
    icon: str


# -------------------------------------------------
# Full definition
# -------------------------------------------------
class DisciplineDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: Discipline
    name: str
    short_name: str
    description: str
    icon: str
    color: str
    terminology: Terminology

    tabs: List[TabDef] = Field(default_factory=list)
    synthesis_blocks: List[SynthesisBlockDef] = Field(default_factory=list)
    form_sections: List[SectionDef] = Field(default_factory=list)

    available_modules: List[str] = Field(default_factory=list)
    recommended_modules: List[str] = Field(default_factory=list)
    phases: List[DisciplinePhase] = Field(default_factory=list)
    project_types: List[DisciplineProjectType] = Field(default_factory=list)
    crm_pipeline_stages: List[str] = Field(default_factory=list)

    # Base feature flags; workspace overrides are merged on top
    flags: Dict[str, Any] = Field(default_factory=dict)


class DisciplineOption(BaseModel):
    """Selector entry for the discipline picker."""

    slug: Discipline
    name: str
    short_name: str
    description: str
    color: str
    icon: str


# -------------------------------------------------
# Resolved view configuration (one render pass)
# -------------------------------------------------
class ViewConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    discipline: Discipline
    terminology: Terminology
    tabs: List[TabDef] = Field(default_factory=list)
    synthesis_blocks: List[SynthesisBlockDef] = Field(default_factory=list)
    form_sections: List[SectionDef] = Field(default_factory=list)
    flags: Dict[str, Any] = Field(default_factory=dict)


class ViewConfigRead(BaseModel):
    discipline: Discipline
    terminology: Terminology
    tabs: List[ViewDefinitionRead] = Field(default_factory=list)
    synthesis_blocks: List[ViewDefinitionRead] = Field(default_factory=list)
    form_sections: List[ViewDefinitionRead] = Field(default_factory=list)
    flags: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_config(cls, config: ViewConfig) -> "ViewConfigRead":
        return cls(
            discipline=config.discipline,
            terminology=config.terminology,
            tabs=[ViewDefinitionRead.from_definition(d) for d in config.tabs],
            synthesis_blocks=[ViewDefinitionRead.from_definition(d) for d in config.synthesis_blocks],
            form_sections=[ViewDefinitionRead.from_definition(d) for d in config.form_sections],
            flags=dict(config.flags),
        )
