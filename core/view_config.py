# core/view_config.py

"""
View-definition resolver.

Turns a discipline's declared tabs / synthesis blocks / form sections into
the ordered list the UI renders:

  1. apply workspace overrides (optional)
  2. drop entries with visible=False
  3. stable sort by `order`; ties keep declaration order

Nothing in this module raises. Unknown disciplines resolve to the default
discipline, unknown keys are never visible, and unknown icons resolve to
the fallback icon.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, TypeVar, Union

from core.disciplines import get_discipline
from core.icons import FALLBACK_ICON
from core.overrides import apply_view_overrides, merge_flags
from core.terminology import resolve_terminology
from models.discipline import ViewConfig
from models.enums import Discipline, ViewKind
from models.view_definition import SectionDef, SynthesisBlockDef, TabDef, ViewDefinition

D = TypeVar("D", bound=ViewDefinition)

DisciplineRef = Union[str, Discipline, None]


# ============================================================
# Core pipeline
# ============================================================
def resolve_definitions(
    definitions: Sequence[D],
    overrides: Optional[Mapping[str, Any]] = None,
) -> List[D]:
    layered = apply_view_overrides(definitions, overrides)
    visible = [d for d in layered if d.visible]
    # sorted() is stable
    return sorted(visible, key=lambda d: d.order)


def _normalize_kind(kind: Union[str, ViewKind]) -> Optional[ViewKind]:
    try:
        return ViewKind(kind)
    except ValueError:
        return None


def _declared(kind: ViewKind, discipline: DisciplineRef) -> List[ViewDefinition]:
    definition = get_discipline(discipline)
    if kind == ViewKind.tabs:
        return list(definition.tabs)
    if kind == ViewKind.synthesis_blocks:
        return list(definition.synthesis_blocks)
    return list(definition.form_sections)


def resolve_view(
    kind: Union[str, ViewKind],
    discipline: DisciplineRef = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> List[ViewDefinition]:
    view_kind = _normalize_kind(kind)
    if view_kind is None:
        return []
    return resolve_definitions(_declared(view_kind, discipline), overrides)


# ============================================================
# Per-kind helpers
# ============================================================
def resolve_tabs(
    discipline: DisciplineRef = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> List[TabDef]:
    return resolve_view(ViewKind.tabs, discipline, overrides)


def resolve_blocks(
    discipline: DisciplineRef = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> List[SynthesisBlockDef]:
    return resolve_view(ViewKind.synthesis_blocks, discipline, overrides)


def resolve_sections(
    discipline: DisciplineRef = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> List[SectionDef]:
    return resolve_view(ViewKind.form_sections, discipline, overrides)


# ============================================================
# Point queries
# ============================================================
def _find(kind, key, discipline, overrides=None) -> Optional[ViewDefinition]:
    for definition in resolve_view(kind, discipline, overrides):
        if definition.key == key:
            return definition
    return None


def is_visible(
    kind: Union[str, ViewKind],
    key: str,
    discipline: DisciplineRef = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> bool:
    """False for hidden entries and for keys the discipline does not declare."""
    return _find(kind, key, discipline, overrides) is not None


def component_for(
    kind: Union[str, ViewKind],
    key: str,
    discipline: DisciplineRef = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> Optional[str]:
    """Component of a visible tab or synthesis block; None otherwise."""
    definition = _find(kind, key, discipline, overrides)
    if definition is None:
        return None
    return getattr(definition, "component", None)


def icon_for(
    kind: Union[str, ViewKind],
    key: str,
    discipline: DisciplineRef = None,
) -> str:
    view_kind = _normalize_kind(kind)
    if view_kind is None:
        return FALLBACK_ICON
    for definition in _declared(view_kind, discipline):
        if definition.key == key:
            return definition.icon_ref
    return FALLBACK_ICON


# ============================================================
# Bundle for one render pass
# ============================================================
def get_view_config(
    discipline: DisciplineRef = None,
    view_overrides: Optional[Mapping[str, Mapping[str, Any]]] = None,
    terminology_overrides: Optional[Dict[str, str]] = None,
    flag_overrides: Optional[Mapping[str, Any]] = None,
) -> ViewConfig:
    """
    Terminology, resolved views and feature flags for one discipline.

    Args:
        discipline: slug, alias or Discipline (unknown → default)
        view_overrides: {view kind: {definition key: ViewOverride | dict}}
        terminology_overrides: workspace label overrides
        flag_overrides: workspace feature flags merged on the discipline's

    Returns:
        ViewConfig
    """
    definition = get_discipline(discipline)
    view_overrides = view_overrides or {}

    return ViewConfig(
        discipline=definition.slug,
        terminology=resolve_terminology(definition.slug, terminology_overrides),
        tabs=resolve_tabs(definition.slug, view_overrides.get(ViewKind.tabs.value)),
        synthesis_blocks=resolve_blocks(definition.slug, view_overrides.get(ViewKind.synthesis_blocks.value)),
        form_sections=resolve_sections(definition.slug, view_overrides.get(ViewKind.form_sections.value)),
        flags=merge_flags(definition.flags, flag_overrides),
    )
