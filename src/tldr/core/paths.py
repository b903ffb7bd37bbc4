"""Locations of runtime data and of assets shipped inside the package."""

from __future__ import annotations

import os
from pathlib import Path

_ENV_VAR = "TLDR_DATA_DIR"
_DEFAULT_DIRNAME = ".tldr"
_PACKAGE_ROOT = Path(__file__).resolve().parents[1]
_SYSTEM_DIR = _PACKAGE_ROOT / "system"


def get_data_dir() -> Path:
    """Return the runtime data directory.

    TLDR_DATA_DIR wins when set to a non-blank value (relative values are taken
    from the current directory); otherwise ~/.tldr is used.
    """
    override = (os.getenv(_ENV_VAR) or "").strip()
    if override:
        return Path(override).expanduser().resolve()
    return (Path.home() / _DEFAULT_DIRNAME).resolve()


def ensure_data_dir() -> Path:
    data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def resolve_data_file(path: str) -> Path:
    """Resolve a configured file path.

    Absolute and ``~`` paths are returned as given; relative ones are placed
    under the runtime data directory.
    """
    candidate = Path(path).expanduser()
    if candidate.is_absolute():
        return candidate
    return ensure_data_dir() / candidate


def get_system_path(*relative: str) -> Path:
    """Return a path inside the package's bundled ``system`` directory."""
    return _SYSTEM_DIR.joinpath(*relative)


__all__ = [
    "get_data_dir",
    "ensure_data_dir",
    "resolve_data_file",
    "get_system_path",
]
