# core/icons.py

"""
Icon registry for view definitions.

Definitions name their icon with the front end's icon component name
("LayoutDashboard", "Users", ...). The registry maps every supported name to
the stable kebab-case reference the front end renders. The table is closed:
any name not listed here resolves to FALLBACK_ICON.
"""

from typing import Optional

FALLBACK_ICON = "circle-help"

ICON_REGISTRY = {
    # Tabs
    "LayoutDashboard": "layout-dashboard",
    "Users": "users",
    "Calendar": "calendar",
    "CheckSquare": "check-square",
    "FolderOpen": "folder-open",
    "Mail": "mail",
    "ListTodo": "list-todo",
    "PenTool": "pen-tool",
    "Megaphone": "megaphone",
    "Sofa": "sofa",
    "Theater": "theater",
    "Building2": "building-2",

    # Synthesis metrics
    "Euro": "euro",
    "Ruler": "ruler",
    "MapPin": "map-pin",
    "Target": "target",
    "Clock": "clock",
    "Palette": "palette",
    "Frame": "frame",
    "Truck": "truck",
    "ShieldCheck": "shield-check",
    "BarChart3": "bar-chart-3",

    # Form sections
    "Info": "info",
    "FileText": "file-text",
    "Briefcase": "briefcase",
    "Scale": "scale",

    # Project types
    "Hammer": "hammer",
    "Maximize2": "maximize-2",
    "FileCheck": "file-check",
    "Map": "map",
    "LayoutGrid": "layout-grid",
    "Store": "store",
    "Home": "home",
    "UtensilsCrossed": "utensils-crossed",
    "Building": "building",
    "Landmark": "landmark",
    "PartyPopper": "party-popper",
    "Box": "box",
    "Sparkles": "sparkles",
    "Globe": "globe",
    "FileVideo": "file-video",

    # Navigation
    "Kanban": "kanban",
    "Receipt": "receipt",
    "HardHat": "hard-hat",
    "Timer": "timer",
    "Library": "library",
    "Settings": "settings",
}


def lookup_icon(name: Optional[str]) -> str:
    """Resolve an icon name; None or unknown names give FALLBACK_ICON."""
    if not name:
        return FALLBACK_ICON
    return ICON_REGISTRY.get(name, FALLBACK_ICON)


def is_icon_known(name: Optional[str]) -> bool:
    return bool(name) and name in ICON_REGISTRY
