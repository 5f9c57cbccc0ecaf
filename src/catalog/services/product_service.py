"""
Product and category service.

Every public method is one unit of work on the session it was built with:
mutations commit before returning, and every failure leaves the method as exactly
one tagged `CatalogError` with a fixed message. Repository errors are chained
(`raise ... from exc`) so the cause stays in logs and tracebacks, but callers
only ever see the service tag.

| Operation                  | Tag on failure                                   |
| -------------------------- | ------------------------------------------------ |
| save_product               | NotFound (category), InternalServerError (store) |
| save_all_products          | NotFound (category), InternalServerError (store) |
| get_all_products           | NotFound (empty), InternalServerError (store)    |
| get_product_by_id          | NotFound                                         |
| update_product             | NotFound (category or product or store)          |
| delete_product             | NotFound                                         |
| delete_all_products        | InternalServerError                              |
| get_products_by_category   | BadRequest                                       |
| get_products_by_page       | MethodNotSupported                               |
| save_category              | BadRequest                                       |
| get_all_categories         | BadRequest                                       |
| get_category_by_id         | NotFound                                         |
| delete_category            | NotFound (absent), BadRequest (referenced/store) |
"""
import logging
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.exceptions.base import (
    BadRequestError,
    CategoryNotFoundError,
    InvalidFieldError,
    InternalServerError,
    MethodNotSupportedError,
    NotFoundError,
    ProductNotFoundError,
    RepositoryError,
)
from catalog.exceptions.mapper import db_error_handler
from catalog.models import Category, Product
from catalog.repositories import CategoryRepository, Page, ProductRepository
from catalog.repositories.ports import CategoryStore, ProductStore
from catalog.schemas import CategoryCreate, ProductCreate

logger = logging.getLogger(__name__)


class ProductService:
    """
    Persistence workflow for products and their categories.

    `products` and `categories` default to the SQLAlchemy repositories bound to
    `db`; any object implementing the matching port can be passed instead.
    """

    def __init__(
        self,
        db: AsyncSession,
        products: ProductStore | None = None,
        categories: CategoryStore | None = None,
    ):
        self.db = db
        self.products = products if products is not None else ProductRepository(db)
        self.categories = categories if categories is not None else CategoryRepository(db)

    async def _commit(self, model_name: str) -> None:
        async with db_error_handler(self.db, model_name):
            await self.db.commit()

    async def _resolve_category(self, category_id: int) -> Category:
        """Load the referenced category or raise CategoryNotFoundError."""
        try:
            category = await self.categories.get_by_id(category_id)
        except RepositoryError as exc:
            logger.error("service.category.lookup_failed", extra={"category_id": category_id})
            raise CategoryNotFoundError() from exc

        if category is None:
            logger.info("service.category.missing", extra={"category_id": category_id})
            raise CategoryNotFoundError()
        return category

    @staticmethod
    def _apply(product: Product, data: ProductCreate, category: Category) -> Product:
        product.title = data.title
        product.img = data.img
        product.description = data.description
        product.price = data.price
        product.quantity = data.quantity
        product.category = category
        return product

    # =================================================================================================================
    # Products
    # =================================================================================================================

    async def save_product(self, data: ProductCreate) -> Product:
        """
        Create a product in the category `data.category_id`.

        Raises:
            CategoryNotFoundError: The category does not exist; nothing is written.
            InternalServerError: The store rejected the write.
        """
        category = await self._resolve_category(data.category_id)
        product = self._apply(Product(), data, category)

        try:
            product = await self.products.save(product)
            await self._commit("Product")
        except RepositoryError as exc:
            logger.error("service.product.save_failed", extra={"category_id": data.category_id})
            raise InternalServerError("product could not be saved") from exc

        logger.info("service.product.saved", extra={"product_id": product.id})
        return product

    async def save_all_products(self, items: Sequence[ProductCreate]) -> list[Product]:
        """
        Convert every item first, then persist all of them in one batch.

        A single unknown category aborts the whole batch before anything is written.
        """
        resolved: dict[int, Category] = {}
        products: list[Product] = []
        for data in items:
            if data.category_id not in resolved:
                resolved[data.category_id] = await self._resolve_category(data.category_id)
            products.append(self._apply(Product(), data, resolved[data.category_id]))

        try:
            saved = await self.products.save_all(products)
            await self._commit("Product")
        except RepositoryError as exc:
            logger.error("service.product.save_all_failed", extra={"count": len(products)})
            raise InternalServerError("products could not be saved") from exc

        logger.info("service.product.saved_all", extra={"count": len(saved)})
        return saved

    async def get_all_products(self) -> list[Product]:
        """
        Every product in id order.

        Raises:
            NotFoundError: The store holds no products.
            InternalServerError: The store could not be read.
        """
        try:
            products = await self.products.get_all()
        except RepositoryError as exc:
            logger.error("service.product.list_failed")
            raise InternalServerError("An error occurred while retrieving products.") from exc

        if not products:
            raise NotFoundError("No products found in the database.")
        return products

    async def get_product_by_id(self, product_id: int) -> Product:
        try:
            product = await self.products.get_by_id(product_id)
        except RepositoryError as exc:
            logger.error("service.product.lookup_failed", extra={"product_id": product_id})
            raise ProductNotFoundError(f"Product not found with ID: {product_id}") from exc

        if product is None:
            raise ProductNotFoundError(f"Product not found with ID: {product_id}")
        return product

    async def update_product(self, product_id: int, data: ProductCreate) -> Product:
        """
        Overwrite every mutable field of an existing product.

        The category is resolved before the product is loaded, so a request that
        names a missing category fails with CategoryNotFoundError even when the
        product id is also unknown.
        """
        category = await self._resolve_category(data.category_id)
        product = await self.get_product_by_id(product_id)
        self._apply(product, data, category)

        try:
            product = await self.products.save(product)
            await self._commit("Product")
        except RepositoryError as exc:
            logger.error("service.product.update_failed", extra={"product_id": product_id})
            raise NotFoundError("product could not be updated") from exc

        logger.info("service.product.updated", extra={"product_id": product_id})
        return product

    async def delete_product(self, product_id: int) -> None:
        try:
            deleted = await self.products.delete(product_id)
            await self._commit("Product")
        except RepositoryError as exc:
            logger.error("service.product.delete_failed", extra={"product_id": product_id})
            raise NotFoundError("product is not in the database") from exc

        if not deleted:
            raise ProductNotFoundError("product is not in the database")
        logger.info("service.product.deleted", extra={"product_id": product_id})

    async def delete_all_products(self) -> int:
        """Remove every product; an empty store is a no-op that returns 0."""
        try:
            deleted = await self.products.delete_all()
            await self._commit("Product")
        except RepositoryError as exc:
            logger.error("service.product.delete_all_failed")
            raise InternalServerError("operation can't be done, database may be unavailable") from exc

        logger.info("service.product.deleted_all", extra={"count": deleted})
        return deleted

    async def get_products_by_category(self, category_name: str) -> list[Product]:
        """Products whose category is named `category_name`; [] for an unknown name."""
        try:
            return await self.products.find_by_category_name(category_name)
        except RepositoryError as exc:
            logger.error("service.product.by_category_failed", extra={"category_name": category_name})
            raise BadRequestError("category is not found") from exc

    async def get_products_by_page(self, page_no: int, page_size: int) -> Page[Product]:
        """
        Zero-based page of products in id order.

        Raises:
            MethodNotSupportedError: Invalid paging values or a store failure.
        """
        try:
            return await self.products.get_page(page_no, page_size)
        except RepositoryError as exc:
            # Bad paging values are client mistakes; anything else is a store failure
            level = logging.INFO if isinstance(exc, InvalidFieldError) else logging.ERROR
            logger.log(
                level,
                "service.product.page_failed",
                extra={"page_no": page_no, "page_size": page_size, "reason": exc.message},
            )
            raise MethodNotSupportedError("page could not be retrieved") from exc

    # =================================================================================================================
    # Categories
    # =================================================================================================================

    async def save_category(self, data: CategoryCreate) -> Category:
        name = data.category_name.strip()
        if not name:
            raise BadRequestError("category name must not be blank", fields=["category_name"])

        try:
            category = await self.categories.save(Category(category_name=name))
            await self._commit("Category")
        except RepositoryError as exc:
            # Duplicate names end up here too
            logger.info("service.category.save_failed", extra={"category_name": name, "reason": exc.message})
            raise BadRequestError("request failed", fields=exc.fields) from exc

        logger.info("service.category.saved", extra={"category_id": category.id})
        return category

    async def get_all_categories(self) -> list[Category]:
        try:
            return await self.categories.get_all()
        except RepositoryError as exc:
            logger.error("service.category.list_failed")
            raise BadRequestError("request failed") from exc

    async def get_category_by_id(self, category_id: int) -> Category:
        try:
            category = await self.categories.get_by_id(category_id)
        except RepositoryError as exc:
            logger.error("service.category.lookup_failed", extra={"category_id": category_id})
            raise CategoryNotFoundError(fields=["id"]) from exc

        if category is None:
            raise CategoryNotFoundError(fields=["id"])
        return category

    async def delete_category(self, category_id: int) -> None:
        """
        Delete a category no product references.

        Raises:
            CategoryNotFoundError: No category with that id.
            BadRequestError: Products still reference the category.
        """
        await self.get_category_by_id(category_id)

        try:
            in_use = await self.products.count_by_category_id(category_id)
            if in_use:
                logger.info(
                    "service.category.delete_refused",
                    extra={"category_id": category_id, "product_count": in_use},
                )
                raise BadRequestError("category is still referenced by products", fields=["category_id"])

            await self.categories.delete(category_id)
            await self._commit("Category")
        except RepositoryError as exc:
            logger.error("service.category.delete_failed", extra={"category_id": category_id})
            raise BadRequestError("request failed", fields=["category_id"]) from exc

        logger.info("service.category.deleted", extra={"category_id": category_id})
