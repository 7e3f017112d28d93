# routers/config.py

from typing import List

from fastapi import APIRouter

from core.disciplines import get_discipline, get_discipline_options
from core.terminology import resolve_terminology
from core.view_config import get_view_config
from models.discipline import DisciplineDefinition, DisciplineOption, Terminology, ViewConfigRead


router = APIRouter(
    prefix="/config",
    tags=["Configuration"],
)


# -----------------------------------------------------
# GET /config/disciplines
# Static; no auth required
# -----------------------------------------------------
@router.get("/disciplines", response_model=List[DisciplineOption], summary="List disciplines")
def list_disciplines():
    return get_discipline_options()


# -----------------------------------------------------
# GET /config/disciplines/{slug}
# Unknown slugs degrade to the default discipline
# -----------------------------------------------------
@router.get("/disciplines/{slug}", response_model=DisciplineDefinition, summary="Discipline definition")
def read_discipline(slug: str):
    return get_discipline(slug)


@router.get("/disciplines/{slug}/terminology", response_model=Terminology, summary="Discipline terminology")
def read_terminology(slug: str):
    return resolve_terminology(slug)


@router.get("/disciplines/{slug}/views", response_model=ViewConfigRead, summary="Resolved views for a discipline")
def read_views(slug: str):
    return ViewConfigRead.from_config(get_view_config(slug))
