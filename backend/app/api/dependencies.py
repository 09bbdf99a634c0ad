# backend/app/api/dependencies.py
from typing import Optional
from fastapi import Query

from app import models, schemas
from app.core.config import settings
from app.schemas.page import MAX_QUERY_INT, MIN_QUERY_INT
from app.services.player_filter import PlayerFilter


def get_player_filter(
    name: Optional[str] = None,
    title: Optional[str] = None,
    race: Optional[models.Race] = None,
    profession: Optional[models.Profession] = None,
    after: Optional[int] = Query(None, description="Birthday lower bound, epoch ms, inclusive"),
    before: Optional[int] = Query(None, description="Birthday upper bound, epoch ms, inclusive"),
    banned: Optional[bool] = None,
    min_experience: Optional[int] = Query(None, alias="minExperience", ge=MIN_QUERY_INT, le=MAX_QUERY_INT),
    max_experience: Optional[int] = Query(None, alias="maxExperience", ge=MIN_QUERY_INT, le=MAX_QUERY_INT),
    min_level: Optional[int] = Query(None, alias="minLevel", ge=MIN_QUERY_INT, le=MAX_QUERY_INT),
    max_level: Optional[int] = Query(None, alias="maxLevel", ge=MIN_QUERY_INT, le=MAX_QUERY_INT),
) -> PlayerFilter:
    """Collects the optional list/count filters from the query string."""
    return PlayerFilter(
        name=name,
        title=title,
        race=race,
        profession=profession,
        after=after,
        before=before,
        banned=banned,
        min_experience=min_experience,
        max_experience=max_experience,
        min_level=min_level,
        max_level=max_level,
    )


def get_page_request(
    order: schemas.PlayerOrder = Query(schemas.PlayerOrder.ID, description="Sort column"),
    page_number: int = Query(0, alias="pageNumber", ge=0, le=MAX_QUERY_INT),
    page_size: Optional[int] = Query(None, alias="pageSize", ge=1, le=settings.MAX_PAGE_SIZE),
) -> schemas.PageRequest:
    if page_size is None:
        page_size = settings.DEFAULT_PAGE_SIZE
    return schemas.PageRequest(page_number=page_number, page_size=page_size, order=order)
