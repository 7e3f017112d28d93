# core/overrides.py

"""
Layered configuration: discipline defaults first, workspace overrides on top.

Every function here returns new objects; inputs are never mutated.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, TypeVar

from pydantic import ValidationError

from core.logging_config import logger
from models.view_definition import ViewDefinition, ViewOverride

D = TypeVar("D", bound=ViewDefinition)


# -----------------------------------------------------
# Feature flags
# -----------------------------------------------------
def merge_flags(
    base: Optional[Mapping[str, Any]],
    overrides: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Shallow merge; for any key present in `overrides`, the override wins."""
    merged = dict(base or {})
    if overrides:
        merged.update(overrides)
    return merged


# -----------------------------------------------------
# View definitions
# -----------------------------------------------------
def apply_view_overrides(
    definitions: Sequence[D],
    overrides: Optional[Mapping[str, Any]] = None,
) -> List[D]:
    """
    Apply per-key overrides (visible / order / label) to a definition list.

    Override values may be ViewOverride instances or plain dicts. Keys that
    do not exist in `definitions` are ignored; None fields keep the base value.
    A malformed override is logged and skipped.
    """
    if not overrides:
        return list(definitions)

    result = []
    for definition in definitions:
        raw = overrides.get(definition.key)
        if raw is None:
            result.append(definition)
            continue

        try:
            override = raw if isinstance(raw, ViewOverride) else ViewOverride.model_validate(raw)
        except ValidationError as e:
            logger.warning(f"Ignoring malformed view override for {definition.key!r}: {e.errors()}")
            result.append(definition)
            continue

        update = override.model_dump(exclude_none=True)
        result.append(definition.model_copy(update=update) if update else definition)

    return result


# -----------------------------------------------------
# Option lists (hidden_* / custom_* workspace settings)
# -----------------------------------------------------
def merge_option_list(
    base: Sequence[str],
    hidden: Optional[Sequence[str]] = None,
    custom: Optional[Sequence[str]] = None,
) -> List[str]:
    """
    Remove hidden values from `base`, then append custom values.

    Custom values already present in the base list are not duplicated.
    """
    hidden_set = set(hidden or [])
    merged = [value for value in base if value not in hidden_set]

    for value in custom or []:
        if value not in merged and value not in base:
            merged.append(value)

    return merged
