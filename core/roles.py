# core/roles.py

from typing import Optional, Union

from models.enums import AppRole


# ============================================
# ROLE RANKS (lowest → highest)
# ============================================
ROLE_RANKS = {
    AppRole.viewer: 0,
    AppRole.member: 1,
    AppRole.admin: 2,
    AppRole.owner: 3,
}


def normalize_role(role: Union[str, AppRole, None]) -> Optional[AppRole]:
    if role is None:
        return None
    try:
        return AppRole(role)
    except ValueError:
        return None


def role_rank(role: Union[str, AppRole, None]) -> int:
    """Rank of a role; -1 for None or unknown roles (below viewer)."""
    normalized = normalize_role(role)
    if normalized is None:
        return -1
    return ROLE_RANKS[normalized]


def has_min_role(
    actor_role: Union[str, AppRole, None],
    min_role: Union[str, AppRole, None],
) -> bool:
    """
    True when `actor_role` ranks at least `min_role`.

    A missing min_role is vacuous; an unknown min_role is never satisfied.
    """
    if min_role is None:
        return True
    required = normalize_role(min_role)
    if required is None:
        return False
    return role_rank(actor_role) >= ROLE_RANKS[required]
