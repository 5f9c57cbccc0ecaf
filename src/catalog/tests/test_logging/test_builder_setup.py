# src/catalog/tests/test_logging/test_builder_setup.py
import logging
from types import SimpleNamespace

from catalog.core.logging.builder import make_dict_config, setup_logging


def make_settings(**overrides):
    # Duck-typed stand-in for Settings; only the logging fields are read
    values = dict(
        LOG_FORMAT="json",
        LOG_LEVEL="INFO",
        LOG_TO_STDOUT=False,
        LOG_DIR=None,
        LOG_MAX_BYTES=1000,
        LOG_BACKUP_COUNT=1,
        ENV="development",
        ENABLE_SQL_LOGGING=False,
    )
    values.update(overrides)
    return SimpleNamespace(**values)


def test_file_handlers_when_not_logging_to_stdout(tmp_path):
    cfg = make_dict_config(make_settings(LOG_DIR=tmp_path))

    assert set(cfg["handlers"]) == {"console", "file", "error_file"}
    assert cfg["handlers"]["file"]["filename"] == str(tmp_path / "catalog.log")
    assert cfg["handlers"]["error_file"]["level"] == "ERROR"
    assert cfg["loggers"][""]["handlers"] == ["console", "file", "error_file"]


def test_stdout_mode_uses_error_console(tmp_path):
    cfg = make_dict_config(make_settings(LOG_TO_STDOUT=True, LOG_DIR=tmp_path))

    assert set(cfg["handlers"]) == {"console", "error_console"}


def test_text_format_uses_standard_formatter():
    cfg = make_dict_config(make_settings(LOG_TO_STDOUT=True, LOG_FORMAT="text"))

    assert cfg["handlers"]["console"]["formatter"] == "standard"
    assert cfg["formatters"]["json"]["service"] == "product-catalog"


def test_sql_logging_toggle():
    quiet = make_dict_config(make_settings(LOG_TO_STDOUT=True))
    loud = make_dict_config(make_settings(LOG_TO_STDOUT=True, ENABLE_SQL_LOGGING=True))

    assert quiet["loggers"]["sqlalchemy.engine"]["level"] == "WARNING"
    assert loud["loggers"]["sqlalchemy.engine"]["level"] == "DEBUG"


def test_setup_logging_creates_log_dir(tmp_path):
    settings = make_settings(LOG_DIR=tmp_path / "logs")
    assert not settings.LOG_DIR.exists()

    setup_logging(settings)

    assert settings.LOG_DIR.exists()
    assert logging.getLogger().handlers
