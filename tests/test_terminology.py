# tests/test_terminology.py

"""
Tests for the discipline registry and terminology resolver.
"""

import pytest

from core.disciplines import (
    DISCIPLINE_ORDER,
    get_all_disciplines,
    get_crm_pipeline_stages,
    get_default_phases,
    get_discipline,
    get_discipline_options,
    get_project_types,
    is_discipline_valid,
    is_module_available,
    is_module_recommended,
    normalize_discipline,
)
from core.terminology import resolve_terminology, term
from models.discipline import TERMINOLOGY_KEYS
from models.enums import Discipline


@pytest.mark.parametrize("discipline", list(Discipline))
def test_terminology_is_total_for_every_discipline(discipline):
    """Every required key has a non-empty label."""
    terminology = resolve_terminology(discipline)
    for key in TERMINOLOGY_KEYS:
        value = getattr(terminology, key)
        assert isinstance(value, str)
        assert value.strip(), f"{discipline}.{key} is empty"


def test_missing_discipline_falls_back_to_architecture():
    assert resolve_terminology(None) == resolve_terminology("architecture")


def test_unknown_discipline_falls_back_to_architecture():
    assert resolve_terminology("underwater-basket-weaving") == resolve_terminology(Discipline.architecture)


def test_disciplines_use_their_own_vocabulary():
    assert resolve_terminology("architecture").client == "Maître d'ouvrage"
    assert resolve_terminology("scenography").chantier == "Montage"
    assert resolve_terminology("communication").client == "Annonceur"
    assert resolve_terminology("interior_design").dce == "Cahier des charges"


@pytest.mark.parametrize(
    "alias, expected",
    [
        ("interior", Discipline.interior_design),
        ("scenographie", Discipline.scenography),
        ("archi", Discipline.architecture),
        ("  Communication ", Discipline.communication),
        ("nope", None),
        (None, None),
    ],
)
def test_normalize_discipline_accepts_legacy_slugs(alias, expected):
    assert normalize_discipline(alias) == expected


def test_alias_resolves_to_same_terminology():
    assert resolve_terminology("scenographie") == resolve_terminology(Discipline.scenography)


def test_overrides_replace_known_keys_only():
    terminology = resolve_terminology(
        "architecture",
        overrides={"client": "Client", "unknown_key": "ignored", "lot": "   "},
    )

    assert terminology.client == "Client"
    assert terminology.lot == resolve_terminology("architecture").lot
    assert not hasattr(terminology, "unknown_key")


def test_overrides_do_not_mutate_registry():
    resolve_terminology("architecture", overrides={"project": "Opération"})
    assert resolve_terminology("architecture").project == "Projet"


def test_term_lookup():
    assert term("surface", "scenography") == "Surface d'exposition"
    assert term("not-a-term", "scenography") == "not-a-term"


def test_registry_helpers():
    assert is_discipline_valid("interior")
    assert not is_discipline_valid("plumbing")
    assert get_discipline("bogus").slug == Discipline.architecture
    assert [d.slug for d in get_all_disciplines()] == DISCIPLINE_ORDER
    assert [o.slug for o in get_discipline_options()] == DISCIPLINE_ORDER


def test_discipline_catalog_data():
    assert [p.code for p in get_default_phases("architecture")][:3] == ["ESQ", "APS", "APD"]
    assert get_default_phases("communication")[0].code == "BRIEF"
    assert "stand" in [t.value for t in get_project_types("scenography")]
    assert get_crm_pipeline_stages("scenography")[-2] == "Lauréat"

    assert is_module_available("communication", "campaigns")
    assert not is_module_available("architecture", "campaigns")
    assert is_module_recommended("architecture", "construction")
    assert not is_module_recommended("scenography", "construction")


@pytest.mark.parametrize("discipline", get_all_disciplines(), ids=lambda d: d.slug.value)
def test_recommended_modules_are_available(discipline):
    assert set(discipline.recommended_modules) <= set(discipline.available_modules)
