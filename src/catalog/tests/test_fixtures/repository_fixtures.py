"""Fixtures for repository tests."""

import uuid

import pytest
from faker import Faker
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.models import Category, Product, User
from catalog.repositories import (
    CartRepository,
    CategoryRepository,
    ProductRepository,
    UserRepository,
)

# NOTE: All fixtures in this file depend on the `db_session` fixture defined in conftest.py,
# which is backed by a fresh database per test.


@pytest.fixture
def fake() -> Faker:
    """Seeded Faker so failures are reproducible."""
    Faker.seed(20240601)
    return Faker()


@pytest.fixture
async def product_repository(db_session: AsyncSession) -> ProductRepository:
    return ProductRepository(db_session)


@pytest.fixture
async def category_repository(db_session: AsyncSession) -> CategoryRepository:
    return CategoryRepository(db_session)


@pytest.fixture
async def cart_repository(db_session: AsyncSession) -> CartRepository:
    return CartRepository(db_session)


@pytest.fixture
async def user_repository(db_session: AsyncSession) -> UserRepository:
    return UserRepository(db_session)


@pytest.fixture
async def create_category(category_repository: CategoryRepository):
    """
    Factory: `await create_category("Books")` persists and returns a Category.
    A unique name is generated when none is given.
    """
    async def _create(category_name: str | None = None) -> Category:
        name = category_name or f"category_{uuid.uuid4().hex[:8]}"
        return await category_repository.save(Category(category_name=name))

    return _create


@pytest.fixture
async def electronics(create_category) -> Category:
    return await create_category("Electronics")


@pytest.fixture
async def create_product(product_repository: ProductRepository, electronics: Category, fake: Faker):
    """
    Factory: `await create_product(title="Phone", price=500)` persists a Product.

    Unspecified fields are generated; the category defaults to `electronics`.
    """
    async def _create(category: Category | None = None, **overrides) -> Product:
        data = {
            "title": fake.catch_phrase(),
            "img": fake.image_url(),
            "description": fake.sentence(),
            "price": fake.random_int(min=1, max=5000),
            "quantity": fake.random_int(min=0, max=100),
        }
        data.update(overrides)
        return await product_repository.save(Product(category=category or electronics, **data))

    return _create


@pytest.fixture
async def multiple_products(create_product) -> list[Product]:
    """Five persisted products in insertion (= id) order."""
    return [await create_product(title=f"product_{idx}") for idx in range(5)]


@pytest.fixture
async def create_user(user_repository: UserRepository):
    """
    Factory: `await create_user(username="bob")` persists a User with a unique
    username/email unless overridden.
    """
    async def _create(**overrides) -> User:
        suffix = uuid.uuid4().hex[:8]
        data = {"username": f"user_{suffix}", "email": f"user_{suffix}@example.com"}
        data.update(overrides)
        return await user_repository.create_user(**data)

    return _create
