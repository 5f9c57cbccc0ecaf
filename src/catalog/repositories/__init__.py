from .base_repository import BaseRepository, Page
from .product_repository import ProductRepository
from .category_repository import CategoryRepository
from .cart_repository import CartRepository
from .user_repository import UserRepository
from .ports import ProductStore, CategoryStore, CartStore

__all__ = [
    "BaseRepository",
    "Page",
    "ProductRepository",
    "CategoryRepository",
    "CartRepository",
    "UserRepository",
    "ProductStore",
    "CategoryStore",
    "CartStore",
]
