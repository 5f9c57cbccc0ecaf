from typing import Generic, TypeVar

from pydantic import BaseModel, Field

ItemType = TypeVar("ItemType")


class PageResponse(BaseModel, Generic[ItemType]):
    """One zero-based page plus the totals needed to render navigation."""

    items: list[ItemType] = Field(default_factory=list)
    page_no: int
    page_size: int
    total_items: int
    total_pages: int
    has_next: bool
