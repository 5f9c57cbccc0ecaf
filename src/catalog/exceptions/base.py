# catalog/
# │
# ├── exceptions/
# │   ├── __init__.py
# │   ├── base.py                    # App-level errors (CatalogError, service tags, repository errors)
# │   ├── integrity_classifier.py    # SQL-level / DB-specific errors
# │   └── mapper.py                  # Map SQL-level / DB-specific errors to app-level errors
"""
Error taxonomy for the catalog.

Every error raised out of the service layer is a `CatalogError`: a human-readable
message plus a coarse `ErrorCode` tag. Transport layers only need `to_payload()`
and `http_status()`.

Two families hang off `CatalogError`:

  - service tags (NotFoundError, BadRequestError, InternalServerError,
    MethodNotSupportedError): what callers of `ProductService` see.
  - repository errors (RepositoryError, DuplicateError, InvalidFieldError):
    raised by repositories and translated by the service into a service tag.
"""

from enum import Enum
from typing import Iterable


class ErrorCode(str, Enum):
    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"
    INTERNAL_SERVER_ERROR = "internal_server_error"
    METHOD_NOT_SUPPORTED = "method_not_supported"
    DUPLICATE = "duplicate"
    INVALID_FIELD = "invalid_field"


class CatalogError(Exception):
    """
    Base exception: a message and an error-code tag.

    - message: human-friendly message (safe to show to clients)
    - error_code: canonical tag used by clients and for HTTP mapping
    - fields: optional list of field names related to the error (e.g., ['category_id'])
    """

    # Map canonical error_code -> default HTTP status.
    ERROR_CODE_TO_STATUS = {
        ErrorCode.NOT_FOUND: 404,
        ErrorCode.BAD_REQUEST: 400,
        ErrorCode.INTERNAL_SERVER_ERROR: 500,
        ErrorCode.METHOD_NOT_SUPPORTED: 405,
        ErrorCode.DUPLICATE: 409,
        ErrorCode.INVALID_FIELD: 422,
    }

    default_code: ErrorCode | None = None

    def __init__(self, message: str, *, error_code: ErrorCode | None = None,
                 fields: Iterable[str] | None = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_code
        self.fields = list(fields) if fields else None

    def __str__(self) -> str:
        parts = []
        if self.fields:
            parts.append(f"fields: {', '.join(self.fields)}")
        if self.error_code:
            parts.append(f"code: {self.error_code.value}")
        if parts:
            return f"{self.message} ({'; '.join(parts)})"
        return self.message

    def to_payload(self) -> dict:
        """
        Return a JSON-serializable dict suitable for HTTP responses:
            {"detail": "...", "code": "not_found", "fields": [...]}
        """
        payload = {"detail": self.message}
        if self.error_code:
            payload["code"] = self.error_code.value
        if self.fields:
            payload["fields"] = list(self.fields)
        return payload

    def http_status(self) -> int:
        """Status for this error's tag; 400 when the error carries no tag."""
        if self.error_code:
            return self.ERROR_CODE_TO_STATUS.get(self.error_code, 400)
        return 400


# =================================================================================================================
# Service-level tags
# =================================================================================================================

class NotFoundError(CatalogError):
    default_code = ErrorCode.NOT_FOUND

    def __init__(self, message: str = "Not found", *, fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields)


class CategoryNotFoundError(NotFoundError):
    """The category a product refers to does not exist."""

    def __init__(self, message: str = "category not found", *, fields: Iterable[str] | None = ("category_id",)):
        super().__init__(message, fields=fields)


class ProductNotFoundError(NotFoundError):
    """No product with the requested id."""

    def __init__(self, message: str = "product not found", *, fields: Iterable[str] | None = ("id",)):
        super().__init__(message, fields=fields)


class BadRequestError(CatalogError):
    default_code = ErrorCode.BAD_REQUEST

    def __init__(self, message: str = "request failed", *, fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields)


class InternalServerError(CatalogError):
    default_code = ErrorCode.INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "internal error", *, fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields)


class MethodNotSupportedError(CatalogError):
    default_code = ErrorCode.METHOD_NOT_SUPPORTED

    def __init__(self, message: str = "method not supported", *, fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields)


# =================================================================================================================
# Repository-level errors
# =================================================================================================================

class RepositoryError(CatalogError):
    """
    Storage failure raised by repositories.

    - constraint: optional DB constraint name (for logs only, never in payloads)
    """

    default_code = ErrorCode.INTERNAL_SERVER_ERROR

    def __init__(self, message: str, *, fields: Iterable[str] | None = None,
                 constraint: str | None = None, error_code: ErrorCode | None = None):
        super().__init__(message, error_code=error_code, fields=fields)
        self.constraint = constraint


class DuplicateError(RepositoryError):
    def __init__(self, message: str, *, fields: Iterable[str] | None = None, constraint: str | None = None):
        super().__init__(message, fields=fields, constraint=constraint, error_code=ErrorCode.DUPLICATE)


class InvalidFieldError(RepositoryError):
    """Raised when a repository gets arguments it cannot use: unknown fields, bad paging values."""

    def __init__(self, message: str, *, fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields, error_code=ErrorCode.INVALID_FIELD)


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
