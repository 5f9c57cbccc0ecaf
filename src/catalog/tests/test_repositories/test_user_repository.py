import pytest

from catalog.exceptions.base import DuplicateError


class TestUserRepository:

    async def test_create_user_normalizes_input(self, user_repository):
        user = await user_repository.create_user("  alice ", " Alice@Example.COM ")

        assert user.username == "alice"
        assert user.email == "alice@example.com"
        assert await user_repository.get_by_id(user.id) is user

    async def test_duplicate_username_raises(self, user_repository, create_user):
        await create_user(username="bob")

        with pytest.raises(DuplicateError):
            await create_user(username="bob")
