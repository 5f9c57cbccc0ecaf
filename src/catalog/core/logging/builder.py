# src/catalog/core/logging/builder.py
"""
Logging builder: turn Settings into a dictConfig mapping and apply it.

    setup_logging(settings)

is the only call the application needs at start-up. `make_dict_config` is split
out so tests can inspect the mapping without touching global logging state.

Handler selection:

| LOG_TO_STDOUT | LOG_DIR | Active handlers                  |
| ------------- | ------- | -------------------------------- |
| true          | any     | console + error_console          |
| false         | unset   | console + error_console          |
| false         | set     | console + file + error_file      |
"""

from __future__ import annotations

from pathlib import Path
import logging
import logging.config

from catalog.config.settings import Settings
from catalog.utils.logging import get_project_name, get_project_version

from .formatters import JsonFormatter, ColorFormatter
from .filters import RequestIdFilter, RedactFilter
from .handlers import (
    get_console_handler,
    get_file_handler,
    get_error_file_handler,
    get_error_console_handler,
)


def _files_enabled(settings: Settings) -> bool:
    return (not settings.LOG_TO_STDOUT) and bool(settings.LOG_DIR)


def make_dict_config(settings: Settings) -> dict:
    """
    Build the dictConfig mapping using the provided settings.

    The returned mapping includes:
      - formatters: "standard" (color in text mode, plain otherwise) and "json"
      - filters: "request_id", "redact"
      - handlers: console, then file/error_file or error_console
      - loggers: root, uvicorn.error, uvicorn.access, sqlalchemy.engine
    """
    formatters = {
        "standard": {
            "()": ColorFormatter if settings.LOG_FORMAT == "text" else logging.Formatter,
            "format": "%(asctime)s | %(levelname)s | %(name)s | %(request_id)s | %(message)s",
        },
        "json": {
            "()": JsonFormatter,
            "env": settings.ENV,
            "service": get_project_name(),
            "version": get_project_version(),
        },
    }

    filters = {
        "request_id": {"()": RequestIdFilter},
        "redact": {"()": RedactFilter},
    }

    handlers: dict[str, dict] = {"console": get_console_handler(settings)}

    if _files_enabled(settings):
        handlers["file"] = get_file_handler(settings)
        handlers["error_file"] = get_error_file_handler(settings)
    else:
        handlers["error_console"] = get_error_console_handler(settings)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "filters": filters,
        "handlers": handlers,
        "loggers": {
            "": {
                "handlers": list(handlers.keys()),
                "level": settings.LOG_LEVEL,
                "propagate": True,
            },
            "uvicorn.error": {
                "level": settings.LOG_LEVEL,
                "handlers": list(handlers.keys()),
                "propagate": False,
            },
            "uvicorn.access": {
                "level": "INFO",
                "handlers": ["console"],
                "propagate": False,
            },
            # Statement logging can leak row values
            "sqlalchemy.engine": {
                "level": "DEBUG" if settings.ENABLE_SQL_LOGGING else "WARNING",
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }


def setup_logging(settings: Settings) -> None:
    """
    Initialize logging from settings.

    Creates LOG_DIR when file handlers are active, applies the dictConfig and
    adds a RequestIdFilter on the root logger so `%(request_id)s` never fails
    for records emitted by handlers configured elsewhere.
    """
    if _files_enabled(settings):
        Path(settings.LOG_DIR).mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(make_dict_config(settings))
    logging.getLogger().addFilter(RequestIdFilter())

    logging.getLogger(__name__).debug(
        "logging.configured",
        extra={"env": settings.ENV, "level": settings.LOG_LEVEL, "format": settings.LOG_FORMAT},
    )
