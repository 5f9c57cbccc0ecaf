from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from catalog.database.base import Base
from .audit import AuditStamp, audit_stamp


class Category(Base):
    """
    SQLAlchemy model for a product Category.

    Products point at their category through `products.category_id`; the category
    itself keeps no collection of products.
    """
    __tablename__ = "categories"
    __mapper_args__ = {"eager_defaults": True}

    # Surrogate key assigned by the database on first insert
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Display name, also used by the filter-by-category lookup
    category_name: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        index=True,
        nullable=False
    )

    audit: Mapped[AuditStamp] = audit_stamp()

    def __repr__(self) -> str:
        return f"<Category(id={self.id!r}, category_name={self.category_name!r})>"
