"""Helpers for locating the project root and the buffer data directory."""

from __future__ import annotations

import os
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_DATA_ROOT_ENV = "NDBUFFER_DATA_ROOT"


def project_root() -> Path:
    """Return the absolute path to the project root directory."""

    return _PROJECT_ROOT


def data_root() -> Path:
    """Return the data directory, honouring ``NDBUFFER_DATA_ROOT`` when set."""

    override = os.getenv(_DATA_ROOT_ENV)
    if override:
        return Path(override).expanduser().resolve()
    return _PROJECT_ROOT / "data"


def resolve_data_path(*relative_segments: str, create: bool = False) -> Path:
    """Resolve a path rooted at the data directory.

    Args:
        *relative_segments: Individual path segments under the data directory.
        create: If ``True``, create the parent directories when resolving.

    Returns:
        Absolute ``Path`` under the data directory.
    """

    path = data_root().joinpath(*relative_segments)
    if create:
        path.parent.mkdir(parents=True, exist_ok=True)
    return path
