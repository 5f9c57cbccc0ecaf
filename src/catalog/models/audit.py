"""
Audit value type shared by every entity.

Entities embed `AuditStamp` as a SQLAlchemy composite instead of inheriting
timestamp columns from a common base class. Each call to `audit_stamp()` builds
fresh `created_at` / `updated_at` columns for the table that declares it.
"""
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import composite, mapped_column
from sqlalchemy.sql import func


@dataclass
class AuditStamp:
    created_at: datetime | None = None
    updated_at: datetime | None = None


def audit_stamp():
    """Composite property for `audit: Mapped[AuditStamp] = audit_stamp()`."""
    return composite(
        AuditStamp,
        # Set by the database when the row is inserted
        mapped_column(
            "created_at",
            DateTime(timezone=True),
            server_default=func.now(),
            nullable=False,
        ),
        # Refreshed on every UPDATE issued through the ORM
        mapped_column(
            "updated_at",
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        ),
    )
