# tests/test_subnav.py

from core.subnav import (
    MODULE_SUB_NAV,
    SUB_NAV_MODULE_REQUIREMENTS,
    default_sub_nav,
    filter_sub_nav,
    is_sub_nav_visible,
)
from models.navigation import SubNavItem


def enabled(*slugs):
    return lambda slug: slug in slugs


def test_items_without_requirement_are_kept():
    items = default_sub_nav("crm")
    result = filter_sub_nav("crm", items, SUB_NAV_MODULE_REQUIREMENTS, enabled())
    assert [i.key for i in result] == ["pipeline", "companies", "contacts"]


def test_required_module_enabled_keeps_item():
    items = default_sub_nav("crm")
    result = filter_sub_nav("crm", items, SUB_NAV_MODULE_REQUIREMENTS, enabled("tenders"))
    assert [i.key for i in result] == ["pipeline", "companies", "contacts", "tenders"]


def test_input_order_is_preserved():
    items = [
        SubNavItem(key="time", label="Temps", href="/tasks/time"),
        SubNavItem(key="board", label="Tableau", href="/tasks"),
        SubNavItem(key="calendar", label="Calendrier", href="/tasks/calendar"),
    ]
    result = filter_sub_nav("tasks", items, SUB_NAV_MODULE_REQUIREMENTS, enabled("time-tracking", "calendar"))
    assert [i.key for i in result] == ["time", "board", "calendar"]


def test_missing_requirement_table_keeps_everything():
    items = default_sub_nav("projects")
    assert filter_sub_nav("projects", items, None, enabled()) == items


def test_point_query():
    assert is_sub_nav_visible("projects", "chantier", SUB_NAV_MODULE_REQUIREMENTS, enabled("construction"))
    assert not is_sub_nav_visible("projects", "chantier", SUB_NAV_MODULE_REQUIREMENTS, enabled())
    assert is_sub_nav_visible("projects", "list", SUB_NAV_MODULE_REQUIREMENTS, enabled())
    assert is_sub_nav_visible("unknown", "anything", SUB_NAV_MODULE_REQUIREMENTS, enabled())


def test_every_requirement_points_at_a_declared_item():
    for module_slug, requirements in SUB_NAV_MODULE_REQUIREMENTS.items():
        keys = {item.key for item in MODULE_SUB_NAV[module_slug]}
        assert set(requirements) <= keys


def test_default_sub_nav_returns_a_copy():
    items = default_sub_nav("crm")
    items.clear()
    assert default_sub_nav("crm")
    assert default_sub_nav("nope") == []
