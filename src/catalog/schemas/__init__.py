from .audit import AuditRead
from .category import CategoryCreate, CategoryRead
from .product import ProductCreate, ProductRead
from .pagination import PageResponse

__all__ = ["AuditRead", "CategoryCreate", "CategoryRead", "ProductCreate", "ProductRead", "PageResponse"]
