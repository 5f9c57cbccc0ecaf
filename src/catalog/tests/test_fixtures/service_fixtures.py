"""Fixtures for service and API tests."""

import pytest
from faker import Faker
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.exceptions.base import RepositoryError
from catalog.models import Category
from catalog.schemas import ProductCreate
from catalog.services import ProductService


@pytest.fixture
async def product_service(db_session: AsyncSession) -> ProductService:
    return ProductService(db_session)


@pytest.fixture
def product_payload(fake: Faker):
    """
    Factory for ProductCreate inputs.

    Usage:
        data = product_payload(category, title="Phone", price=500)
    """
    def _build(category: Category | int, **overrides) -> ProductCreate:
        data = {
            "title": fake.catch_phrase(),
            "img": fake.image_url(),
            "description": fake.sentence(),
            "price": fake.random_int(min=1, max=5000),
            "quantity": fake.random_int(min=0, max=100),
            "category_id": category if isinstance(category, int) else category.id,
        }
        data.update(overrides)
        return ProductCreate(**data)

    return _build


class FailingStore:
    """
    Store double that fails the way a broken database would.

    With no `inner`, every call raises RepositoryError. With an `inner` repository,
    only the methods named in `fail` raise; everything else is delegated.

        FailingStore(ProductRepository(db_session), fail={"save"})
    """

    def __init__(self, inner=None, fail=()):
        self.inner = inner
        self.fail = set(fail)

    def __getattr__(self, name):
        if self.inner is not None and name not in self.fail:
            return getattr(self.inner, name)

        async def _fail(*args, **kwargs):
            raise RepositoryError(f"{name} failed")
        return _fail
