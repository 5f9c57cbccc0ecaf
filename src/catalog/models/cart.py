from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.database.base import Base
from .audit import AuditStamp, audit_stamp

if TYPE_CHECKING:
    from .product import Product
    from .user import User


class UserProductCart(Base):
    """
    One cart line: a user has put a product in their cart.

    The row carries no quantity. A (user, product) pair appears at most once.
    """
    __tablename__ = "user_product_cart"
    __table_args__ = (
        UniqueConstraint("user_id", "product_id", name="uq_user_product_cart_user_id_product_id"),
    )
    __mapper_args__ = {"eager_defaults": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    product_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    audit: Mapped[AuditStamp] = audit_stamp()

    # --- Relationships ---

    user: Mapped["User"] = relationship("User", lazy="joined", innerjoin=True)

    product: Mapped["Product"] = relationship("Product", lazy="joined", innerjoin=True)

    def __repr__(self) -> str:
        return f"<UserProductCart(id={self.id!r}, user_id={self.user_id!r}, product_id={self.product_id!r})>"
