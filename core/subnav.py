# core/subnav.py

from typing import Callable, Dict, List, Mapping, Optional, Sequence

from models.navigation import SubNavItem

ModuleEnabledFn = Callable[[str], bool]


# ============================================================
# Default sub-navigation per module (display order)
# ============================================================
MODULE_SUB_NAV: Dict[str, List[SubNavItem]] = {
    "projects": [
        SubNavItem(key="list", label="Tous les projets", href="/projects", icon="Building2"),
        SubNavItem(key="timeline", label="Planning", href="/projects/timeline", icon="Calendar"),
        SubNavItem(key="chantier", label="Chantier", href="/projects/chantier", icon="HardHat"),
        SubNavItem(key="time", label="Temps passés", href="/projects/time", icon="Timer"),
    ],
    "crm": [
        SubNavItem(key="pipeline", label="Pipeline", href="/crm", icon="Kanban"),
        SubNavItem(key="companies", label="Entreprises", href="/crm/companies", icon="Building"),
        SubNavItem(key="contacts", label="Contacts", href="/crm/contacts", icon="Users"),
        SubNavItem(key="tenders", label="Appels d'offres", href="/crm/tenders", icon="Target"),
    ],
    "commercial": [
        SubNavItem(key="quotes", label="Devis", href="/commercial", icon="FileText"),
        SubNavItem(key="contracts", label="Contrats", href="/commercial/contracts", icon="FileCheck"),
        SubNavItem(key="invoices", label="Factures", href="/commercial/invoices", icon="Receipt"),
    ],
    "tasks": [
        SubNavItem(key="board", label="Tableau", href="/tasks", icon="CheckSquare"),
        SubNavItem(key="calendar", label="Calendrier", href="/tasks/calendar", icon="Calendar"),
        SubNavItem(key="time", label="Temps", href="/tasks/time", icon="Timer"),
    ],
    "documents": [
        SubNavItem(key="all", label="Documents", href="/documents", icon="FolderOpen"),
        SubNavItem(key="references", label="Références", href="/documents/references", icon="Library"),
    ],
    "resources": [
        SubNavItem(key="team", label="Équipe", href="/resources", icon="Users"),
        SubNavItem(key="planning", label="Plan de charge", href="/resources/planning", icon="BarChart3"),
    ],
}


# ============================================================
# module → {sub-nav key → module that must be enabled}
# Items not listed here are always shown.
# ============================================================
SUB_NAV_MODULE_REQUIREMENTS: Dict[str, Dict[str, str]] = {
    "projects": {
        "chantier": "construction",
        "time": "time-tracking",
    },
    "crm": {
        "tenders": "tenders",
    },
    "tasks": {
        "calendar": "calendar",
        "time": "time-tracking",
    },
    "documents": {
        "references": "references",
    },
}


def _required_module(
    module_slug: str,
    item_key: str,
    requirements: Optional[Mapping[str, Mapping[str, str]]],
) -> Optional[str]:
    return (requirements or {}).get(module_slug, {}).get(item_key)


def is_sub_nav_visible(
    module_slug: str,
    item_key: str,
    requirements: Optional[Mapping[str, Mapping[str, str]]],
    module_enabled_fn: ModuleEnabledFn,
) -> bool:
    required = _required_module(module_slug, item_key, requirements)
    if required is None:
        return True
    return bool(module_enabled_fn(required))


def filter_sub_nav(
    module_slug: str,
    items: Sequence[SubNavItem],
    requirements: Optional[Mapping[str, Mapping[str, str]]],
    module_enabled_fn: ModuleEnabledFn,
) -> List[SubNavItem]:
    """Keep items whose required module is enabled; input order is preserved."""
    return [
        item for item in items
        if is_sub_nav_visible(module_slug, item.key, requirements, module_enabled_fn)
    ]


def default_sub_nav(module_slug: str) -> List[SubNavItem]:
    return list(MODULE_SUB_NAV.get(module_slug, []))
