"""
Category repository. Everything it needs comes from BaseRepository.
"""
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.models import Category
from .base_repository import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    """
    Repository for Category entity operations.

    Implements `ports.CategoryStore`.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(Category, db)
