# catalog/api/v1/error_handlers.py
"""
FastAPI exception handlers that turn catalog errors into HTTP responses.

The mapping lives on the exception classes: `.http_status()` picks the status
from the error code and `.to_payload()` builds the body

    {"detail": "...", "code": "not_found", "fields": [...]}

so the handlers here only log and serialize. Register them once from the app
factory with `register_exception_handlers(app)`.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from catalog.exceptions.base import (
    CatalogError,
    InternalServerError,
    NotFoundError,
    RepositoryError,
)

logger = logging.getLogger(__name__)


def _response(exc: CatalogError) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status(), content=exc.to_payload())


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.info(
        "http.not_found",
        extra={"method": request.method, "path": request.url.path, "fields": exc.fields},
    )
    return _response(exc)


async def internal_error_handler(request: Request, exc: InternalServerError) -> JSONResponse:
    # The chained cause was already logged where it was caught
    logger.error(
        "http.internal_error",
        extra={"method": request.method, "path": request.url.path, "detail": exc.message},
    )
    return _response(exc)


async def repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    """
    Repository errors should be translated by the service; one reaching the
    transport layer means a route called a repository directly.
    """
    logger.warning(
        "http.repository_error",
        extra={"method": request.method, "path": request.url.path, "detail": str(exc)},
    )
    return _response(exc)


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    logger.info(
        "http.catalog_error",
        extra={
            "method": request.method,
            "path": request.url.path,
            "code": exc.error_code.value if exc.error_code else None,
        },
    )
    return _response(exc)


def register_exception_handlers(app: FastAPI) -> None:
    # Starlette picks the handler of the nearest class in the exception's MRO
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(InternalServerError, internal_error_handler)
    app.add_exception_handler(RepositoryError, repository_error_handler)
    app.add_exception_handler(CatalogError, catalog_error_handler)
