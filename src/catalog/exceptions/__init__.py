from .base import (
    ErrorCode,
    CatalogError,
    NotFoundError,
    CategoryNotFoundError,
    ProductNotFoundError,
    BadRequestError,
    InternalServerError,
    MethodNotSupportedError,
    RepositoryError,
    DuplicateError,
    InvalidFieldError,
)

__all__ = [
    "ErrorCode",
    "CatalogError",
    "NotFoundError",
    "CategoryNotFoundError",
    "ProductNotFoundError",
    "BadRequestError",
    "InternalServerError",
    "MethodNotSupportedError",
    "RepositoryError",
    "DuplicateError",
    "InvalidFieldError",
]
