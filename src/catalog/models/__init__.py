r"""
Centralized access to all database models of the catalog.

Importing this package registers every model with `Base.metadata`, so
`Base.metadata.create_all()` sees the complete schema.

Example:

    from catalog.models import Category, Product, UserProductCart
"""

from .audit import AuditStamp
from .category import Category
from .product import Product
from .user import User
from .cart import UserProductCart

__all__ = [
    "AuditStamp",
    "Category",
    "Product",
    "User",
    "UserProductCart",
]
