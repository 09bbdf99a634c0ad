# backend/app/schemas/page.py
import math
from enum import Enum
from typing import Any, List, Sequence

from pydantic import BaseModel, Field

from ..core.config import settings
from .player import Player

# Integer query parameters are bounded to the signed 32-bit range.
MIN_QUERY_INT = -(2**31)
MAX_QUERY_INT = 2**31 - 1


class PlayerOrder(str, Enum):
    """Sort keys accepted by GET /players."""
    ID = "ID"
    NAME = "NAME"
    EXPERIENCE = "EXPERIENCE"
    BIRTHDAY = "BIRTHDAY"
    LEVEL = "LEVEL"

    @property
    def attribute(self) -> str:
        """Player model attribute to sort on."""
        return self.value.lower()


class PageRequest(BaseModel):
    page_number: int = Field(0, ge=0, le=MAX_QUERY_INT)
    page_size: int = Field(default_factory=lambda: settings.DEFAULT_PAGE_SIZE, ge=1)
    order: PlayerOrder = PlayerOrder.ID

    @property
    def offset(self) -> int:
        return self.page_number * self.page_size


class PlayerPage(BaseModel):
    """One page of players plus the totals for the whole filtered result set."""
    content: List[Player]
    total_elements: int = Field(..., serialization_alias="totalElements")
    total_pages: int = Field(..., serialization_alias="totalPages")
    page_number: int = Field(..., serialization_alias="pageNumber")
    page_size: int = Field(..., serialization_alias="pageSize")

    @classmethod
    def build(cls, rows: Sequence[Any], total_elements: int, page_request: PageRequest) -> "PlayerPage":
        """Builds a page from ORM rows (or anything with the player attributes)."""
        return cls(
            content=[Player.model_validate(row) for row in rows],
            total_elements=total_elements,
            total_pages=math.ceil(total_elements / page_request.page_size),
            page_number=page_request.page_number,
            page_size=page_request.page_size,
        )
