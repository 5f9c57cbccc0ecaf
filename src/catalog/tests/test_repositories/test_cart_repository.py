import pytest

from catalog.exceptions.base import DuplicateError
from catalog.models import UserProductCart


class TestCartRepository:

    async def test_find_id_for_matching_pair(self, cart_repository, create_user, create_product):
        user = await create_user()
        product = await create_product()
        row = await cart_repository.save(UserProductCart(user=user, product=product))

        assert await cart_repository.find_id_by_user_and_product(user.id, product.id) == row.id

    async def test_find_id_returns_none_without_match(self, cart_repository, create_user, create_product):
        user = await create_user()
        other_user = await create_user()
        product = await create_product()
        await cart_repository.save(UserProductCart(user=user, product=product))

        assert await cart_repository.find_id_by_user_and_product(other_user.id, product.id) is None
        assert await cart_repository.find_id_by_user_and_product(user.id, product.id + 100) is None

    async def test_pair_is_unique(self, cart_repository, create_user, create_product):
        user = await create_user()
        product = await create_product()
        await cart_repository.save(UserProductCart(user=user, product=product))

        with pytest.raises(DuplicateError):
            await cart_repository.save(UserProductCart(user_id=user.id, product_id=product.id))

    async def test_cart_rows_follow_product_deletion(
        self, cart_repository, product_repository, create_user, create_product
    ):
        user = await create_user()
        product = await create_product()
        await cart_repository.save(UserProductCart(user=user, product=product))

        await product_repository.delete(product.id)

        assert await cart_repository.find_id_by_user_and_product(user.id, product.id) is None
