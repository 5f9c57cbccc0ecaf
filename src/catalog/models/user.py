from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from catalog.database.base import Base
from .audit import AuditStamp, audit_stamp


class User(Base):
    """
    SQLAlchemy model for User.

    Only the identity needed by cart rows is modelled here; accounts and
    credentials belong to the host application.
    """
    __tablename__ = "users"
    __mapper_args__ = {"eager_defaults": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Username (must be unique and non-null)
    username: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        index=True,
        nullable=False
    )

    # Email address (must be unique and non-null)
    email: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        index=True,
        nullable=False
    )

    audit: Mapped[AuditStamp] = audit_stamp()

    def __repr__(self) -> str:
        return f"<User(id={self.id!r}, username={self.username!r})>"
