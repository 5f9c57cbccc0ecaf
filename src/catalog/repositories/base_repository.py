"""
Base repository class providing common database operations.

This class serves as a reusable foundation for repositories that interact with
the database using SQLAlchemy's async sessions. Entity-specific repositories
inherit from it and expose the operations of their port (see `ports.py`).

Repositories never commit: writes are flushed so ids and server defaults are
available, and the service decides when the transaction ends.
"""
from __future__ import annotations

import math
import time
import logging
from dataclasses import dataclass, field
from typing import Any, Generic, Sequence, Type, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.database.base import Base
from catalog.exceptions.base import InvalidFieldError, RepositoryError
from catalog.exceptions.mapper import db_error_handler

# Type variable for the model class
ModelType = TypeVar("ModelType", bound=Base)
ItemType = TypeVar("ItemType")

# Setup logging
logger = logging.getLogger(__name__)


@dataclass
class Page(Generic[ItemType]):
    """
    One zero-based window of an ordered result set.

    `items` holds at most `page_size` entries; `total_items` is the size of the
    whole result set, so callers can render page counts without a second query.
    """
    items: list[ItemType] = field(default_factory=list)
    page_no: int = 0
    page_size: int = 0
    total_items: int = 0

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_items / self.page_size)

    @property
    def has_content(self) -> bool:
        return bool(self.items)

    @property
    def has_next(self) -> bool:
        return self.page_no + 1 < self.total_pages

    def __len__(self) -> int:
        return len(self.items)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameters:
        ModelType: The SQLAlchemy model class this repository manages.
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        """
        Initialize the repository.

        Args:
            model: The SQLAlchemy model class (not an instance), used to build queries.
            db: The async database session shared with the calling service.
        """
        self.model = model
        self.db = db

    @property
    def model_name(self) -> str:
        return self.model.__name__

    # =================================================================================================================
    # Write Operations
    # =================================================================================================================

    async def save(self, entity: ModelType) -> ModelType:
        """
        Insert or update a single entity and return it with its id populated.

        Raises:
            DuplicateError: If a unique constraint is violated.
            RepositoryError: For any other database failure.
        """
        start = time.perf_counter()

        async with db_error_handler(self.db, self.model_name):
            self.db.add(entity)
            await self.db.flush()
            # Reload server-side values (timestamps) while we are still in async context
            await self.db.refresh(entity)

        logger.info(
            "repo.save.success",
            extra={
                "model": self.model_name,
                "operation": "save",
                "id": getattr(entity, "id", None),
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        return entity

    async def save_all(self, entities: Sequence[ModelType]) -> list[ModelType]:
        """
        Persist several entities with one flush.

        Nothing is written when `entities` is empty.
        """
        entities = list(entities)
        if not entities:
            logger.debug("repo.save_all.empty", extra={"model": self.model_name, "operation": "save_all"})
            return entities

        start = time.perf_counter()

        async with db_error_handler(self.db, self.model_name):
            self.db.add_all(entities)
            await self.db.flush()

        logger.info(
            "repo.save_all.success",
            extra={
                "model": self.model_name,
                "operation": "save_all",
                "count": len(entities),
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        return entities

    # =================================================================================================================
    # Read Operations (Single Entity)
    # =================================================================================================================

    async def get_by_id(self, entity_id: int) -> ModelType | None:
        """
        Get an entity by its ID.

        Returns:
            The entity if found, otherwise None

        Raises:
            RepositoryError: If an error occurs during retrieval.
        """
        try:
            result = await self.db.execute(
                select(self.model).where(self.model.id == entity_id)
            )
            entity = result.scalar_one_or_none()
            logger.debug(f"Retrieved {self.model_name} by ID: {entity_id} (found={entity is not None})")
            return entity

        except Exception as e:
            logger.error(f"Error retrieving {self.model_name} by ID {entity_id}: {e}")
            raise RepositoryError(f"Failed to retrieve {self.model_name}") from e

    # =================================================================================================================
    # Read Operations (Multiple Entities)
    # =================================================================================================================

    def _order_column(self, order_by: str):
        if not hasattr(self.model, order_by):
            raise InvalidFieldError(
                f"{self.model_name} has no field '{order_by}'", fields=[order_by]
            )
        return getattr(self.model, order_by)

    async def get_all(self, order_by: str = "id") -> list[ModelType]:
        """
        Get every entity ordered by `order_by` (ascending).

        Returns:
            A list of model instances (empty if none found).
        """
        column = self._order_column(order_by)
        try:
            result = await self.db.execute(select(self.model).order_by(column))
            entities = list(result.scalars().all())
            logger.debug(f"Retrieved {len(entities)} {self.model_name} entities")
            return entities

        except Exception as e:
            logger.error(f"Error retrieving all {self.model_name}: {e}")
            raise RepositoryError(f"Failed to retrieve {self.model_name} entities") from e

    async def get_page(self, page_no: int, page_size: int, order_by: str = "id") -> Page[ModelType]:
        """
        Return one zero-based page of entities in `order_by` order.

        Raises:
            InvalidFieldError: If page_no < 0, page_size < 1 or order_by is unknown.
            RepositoryError: If the query fails.
        """
        if page_no < 0:
            raise InvalidFieldError("Page index must not be less than zero", fields=["page_no"])
        if page_size < 1:
            raise InvalidFieldError("Page size must not be less than one", fields=["page_size"])

        column = self._order_column(order_by)
        try:
            total = await self.count()
            result = await self.db.execute(
                select(self.model)
                .order_by(column)
                .offset(page_no * page_size)
                .limit(page_size)
            )
            items = list(result.scalars().all())
            logger.debug(
                f"Retrieved page {page_no} ({len(items)}/{total}) of {self.model_name}",
            )
            return Page(items=items, page_no=page_no, page_size=page_size, total_items=total)

        except RepositoryError:
            raise
        except Exception as e:
            logger.error(f"Error retrieving page {page_no} of {self.model_name}: {e}")
            raise RepositoryError(f"Failed to retrieve {self.model_name} page") from e

    async def count(self, **filters: Any) -> int:
        """
        Count entities with optional equality filters (unknown fields are ignored).
        """
        try:
            query = select(func.count(self.model.id))
            for field_name, value in filters.items():
                if hasattr(self.model, field_name) and value is not None:
                    query = query.where(getattr(self.model, field_name) == value)

            result = await self.db.execute(query)
            return result.scalar() or 0

        except Exception as e:
            logger.error(f"Error counting {self.model_name}: {e}")
            raise RepositoryError(f"Failed to count {self.model_name} entities") from e

    # =================================================================================================================
    # Delete Operations
    # =================================================================================================================

    async def delete(self, entity_id: int) -> bool:
        """
        Delete an entity by its ID.

        Returns:
            True if a row was deleted, False if no row had that id.
        """
        async with db_error_handler(self.db, self.model_name):
            result = await self.db.execute(
                delete(self.model)
                .where(self.model.id == entity_id)
                .returning(self.model.id)
            )
            deleted_ids = result.scalars().all()

        if deleted_ids:
            logger.debug(f"Deleted {self.model_name} with ID: {entity_id}")
            return True

        logger.warning(f"{self.model_name} with ID {entity_id} not found for deletion")
        return False

    async def delete_all(self) -> int:
        """
        Delete every row of the table and return how many were removed.
        """
        async with db_error_handler(self.db, self.model_name):
            # RETURNING instead of rowcount: not every DBAPI reports rowcount reliably
            result = await self.db.execute(
                delete(self.model).returning(self.model.id)
            )
            deleted = len(result.scalars().all())

        logger.info(
            "repo.delete_all.success",
            extra={"model": self.model_name, "operation": "delete_all", "count": deleted},
        )
        return deleted
