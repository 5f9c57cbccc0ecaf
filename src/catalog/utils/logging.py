"""
Project metadata lookups for log enrichment (service name and version).

Values come from the installed distribution when available and from the
nearest pyproject.toml otherwise, so a source checkout logs the same fields.
"""
from pathlib import Path
from importlib import metadata as importlib_metadata
from typing import Any
import logging
import tomllib

logger = logging.getLogger(__name__)

DEFAULT_PROJECT_NAME = "product-catalog"


def find_pyproject(start: Path, max_up: int = 5) -> Path | None:
    """Nearest pyproject.toml in `start` or one of its first `max_up - 1` parents."""
    for directory in [start, *start.parents][:max_up]:
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def load_pyproject_data(pyproject_path: Path) -> dict:
    """
    Parse and return the contents of a pyproject.toml file as a dictionary.
    """
    with pyproject_path.open("rb") as f:
        return tomllib.load(f)


def get_pyproject_value(
    key: str,
    start: str | Path | None = None,
    max_up: int = 5,
    default: Any = None,
) -> Any:
    """
    Return the value for dot-separated `key` (e.g. "project.version") from the
    nearest pyproject.toml, walking up at most `max_up` directories from `start`
    (this module's folder by default).

    Returns `default` when the file is missing, unreadable or lacks the key.
    """
    start_path = Path(start).resolve() if start is not None else Path(__file__).resolve().parent

    pyproject = find_pyproject(start=start_path, max_up=max_up)
    if not pyproject or not key:
        return default

    try:
        data = load_pyproject_data(pyproject)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.debug("pyproject.unreadable", extra={"path": str(pyproject), "error": str(e)})
        return default

    node: Any = data
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return default
        node = node[part]
    return node


def get_project_name(
    start: Path | str | None = None,
    max_up: int = 5,
    default: str | None = DEFAULT_PROJECT_NAME,
) -> str | None:
    """
    Convenience wrapper for project.name in pyproject.toml.
    """
    return get_pyproject_value("project.name", start=start, max_up=max_up, default=default)


def get_project_version(
    start: Path | str | None = None,
    max_up: int = 5,
    default: str = "unknown",
    prefer_installed: bool = True,
) -> str:
    """
    Installed distribution version first, then project.version from
    pyproject.toml, then `default`.
    """
    name = get_project_name(start=start, max_up=max_up)
    if prefer_installed and name:
        try:
            return importlib_metadata.version(name)
        except importlib_metadata.PackageNotFoundError:
            pass

    val = get_pyproject_value("project.version", start=start, max_up=max_up, default=None)
    return val if val is not None else default


__all__ = [
    "find_pyproject",
    "load_pyproject_data",
    "get_pyproject_value",
    "get_project_name",
    "get_project_version",
]
