"""
Product repository: generic CRUD from BaseRepository plus the category-name filter.
"""
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.models import Category, Product
from .base_repository import BaseRepository, RepositoryError

logger = logging.getLogger(__name__)


class ProductRepository(BaseRepository[Product]):
    """
    Repository for Product entity operations.

    Implements `ports.ProductStore`.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(Product, db)

    async def find_by_category_name(self, category_name: str) -> list[Product]:
        """
        Get every product whose category is named exactly `category_name`, in id order.

        Returns:
            The matching products; an empty list when the name matches no category.
        """
        try:
            query = (
                select(Product)
                .join(Category, Product.category_id == Category.id)
                .where(Category.category_name == category_name)
                .order_by(Product.id)
            )
            result = await self.db.execute(query)
            products = list(result.scalars().all())

            logger.debug(f"Found {len(products)} products in category: {category_name}")
            return products

        except Exception as e:
            logger.error(f"Error retrieving products for category {category_name}: {e}")
            raise RepositoryError("Failed to retrieve products by category") from e

    async def count_by_category_id(self, category_id: int) -> int:
        """Number of products that reference the given category."""
        try:
            result = await self.db.execute(
                select(func.count(Product.id)).where(Product.category_id == category_id)
            )
            return result.scalar() or 0

        except Exception as e:
            logger.error(f"Error counting products for category {category_id}: {e}")
            raise RepositoryError("Failed to count products by category") from e
