from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.database.base import Base
from .audit import AuditStamp, audit_stamp

if TYPE_CHECKING:
    from .category import Category


class Product(Base):
    """
    SQLAlchemy model for a catalog Product.

    Every product belongs to exactly one Category. The category is loaded together
    with the product (joined eager load) so it can be read outside the session's
    async context.
    """
    __tablename__ = "products"
    __mapper_args__ = {"eager_defaults": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    # Image URL or storage path
    img: Mapped[str | None] = mapped_column(String(500), nullable=True)

    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Stored as supplied; the unit (whole units or cents) is up to the caller
    price: Mapped[int] = mapped_column(Integer, nullable=False)

    quantity: Mapped[int] = mapped_column(Integer, nullable=False)

    # RESTRICT: a category cannot be removed while products still reference it
    category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
        index=True
    )

    audit: Mapped[AuditStamp] = audit_stamp()

    # --- Relationships ---

    # Many-to-One: each product belongs to a single category
    category: Mapped["Category"] = relationship(
        "Category",
        lazy="joined",
        innerjoin=True
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id!r}, title={self.title!r}, category_id={self.category_id!r})>"
