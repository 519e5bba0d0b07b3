"""mallatrack package."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

__all__ = ["__version__"]


def _source_tree_version() -> str | None:
    """Read the project version when running from a source checkout."""
    pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    if not pyproject.is_file():
        return None
    with pyproject.open("rb") as handle:
        project = tomllib.load(handle).get("project", {})
    if project.get("name") != "mallatrack":
        return None
    return project.get("version")


__version__ = _source_tree_version() or ""
if not __version__:
    try:
        __version__ = version("mallatrack")
    except PackageNotFoundError:
        __version__ = "0+unknown"
