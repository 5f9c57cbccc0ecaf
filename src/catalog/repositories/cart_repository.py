"""
Cart repository: persistence for UserProductCart rows and the (user, product) lookup.
"""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.models import UserProductCart
from .base_repository import BaseRepository, RepositoryError

logger = logging.getLogger(__name__)


class CartRepository(BaseRepository[UserProductCart]):
    """
    Repository for UserProductCart rows.

    Implements `ports.CartStore`.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(UserProductCart, db)

    async def find_id_by_user_and_product(self, user_id: int, product_id: int) -> int | None:
        """
        Find the id of the cart row linking `user_id` to `product_id`.

        Args:
            user_id: The ID of the user
            product_id: The ID of the product

        Returns:
            The ID of the cart row if found, otherwise None
        """
        try:
            result = await self.db.execute(
                select(UserProductCart.id).where(
                    UserProductCart.user_id == user_id,
                    UserProductCart.product_id == product_id,
                )
            )
            cart_id = result.scalar_one_or_none()

            logger.debug(
                "repo.cart.lookup",
                extra={"user_id": user_id, "product_id": product_id, "found": cart_id is not None},
            )
            return cart_id

        except Exception as e:
            logger.error(f"Error looking up cart row for user {user_id} / product {product_id}: {e}")
            raise RepositoryError("Failed to look up cart item") from e
