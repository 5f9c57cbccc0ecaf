"""
Storage ports: the exact operations the service layer needs from each store.

`ProductService` depends on these protocols, not on SQLAlchemy. The repositories in
this package satisfy them; tests or other hosts can pass any object with the same
methods.
"""
from typing import Protocol, Sequence

from catalog.models import Category, Product, UserProductCart
from .base_repository import Page


class ProductStore(Protocol):
    async def get_by_id(self, entity_id: int) -> Product | None: ...

    async def get_all(self, order_by: str = "id") -> list[Product]: ...

    async def get_page(self, page_no: int, page_size: int, order_by: str = "id") -> Page[Product]: ...

    async def find_by_category_name(self, category_name: str) -> list[Product]: ...

    async def count_by_category_id(self, category_id: int) -> int: ...

    async def save(self, entity: Product) -> Product: ...

    async def save_all(self, entities: Sequence[Product]) -> list[Product]: ...

    async def delete(self, entity_id: int) -> bool: ...

    async def delete_all(self) -> int: ...


class CategoryStore(Protocol):
    async def get_by_id(self, entity_id: int) -> Category | None: ...

    async def get_all(self, order_by: str = "id") -> list[Category]: ...

    async def save(self, entity: Category) -> Category: ...

    async def delete(self, entity_id: int) -> bool: ...


class CartStore(Protocol):
    async def find_id_by_user_and_product(self, user_id: int, product_id: int) -> int | None: ...

    async def save(self, entity: UserProductCart) -> UserProductCart: ...
