# core/terminology.py

from typing import Dict, Optional, Union

from core.disciplines import get_discipline
from models.discipline import TERMINOLOGY_KEYS, Terminology
from models.enums import Discipline


def resolve_terminology(
    discipline: Union[str, Discipline, None] = None,
    overrides: Optional[Dict[str, str]] = None,
) -> Terminology:
    """
    Label dictionary for a discipline.

    Unknown or missing disciplines fall back to the default discipline's
    dictionary, so every key is always present.

    Args:
        discipline: slug, alias or Discipline (None → default)
        overrides: workspace label overrides; unknown keys and empty
            strings are ignored

    Returns:
        Terminology
    """
    base = get_discipline(discipline).terminology
    if not overrides:
        return base

    updates = {
        key: value
        for key, value in overrides.items()
        if key in TERMINOLOGY_KEYS and isinstance(value, str) and value.strip()
    }
    if not updates:
        return base
    return base.model_copy(update=updates)


def term(key: str, discipline: Union[str, Discipline, None] = None) -> str:
    """Single label; an unknown key is returned unchanged."""
    if key not in TERMINOLOGY_KEYS:
        return key
    return getattr(resolve_terminology(discipline), key)
