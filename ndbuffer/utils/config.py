"""Configuration loading utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml

from ..interfaces.config import BufferConfig
from .paths import data_root, project_root


def load_config(path: str | Path | None = None) -> BufferConfig:
    """Load buffer tooling configuration from ``config.yml``.

    Args:
        path: Optional path override. Defaults to ``<project_root>/config.yml``.

    Returns:
        A :class:`~ndbuffer.interfaces.config.BufferConfig` populated from YAML.
    """

    config_path = Path(path) if path else project_root() / "config.yml"
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found at {config_path}")

    with config_path.open("r", encoding="utf-8") as handle:
        raw: Mapping[str, Any] = yaml.safe_load(handle) or {}

    buffers = raw.get("buffers") or {}
    return BufferConfig(
        version=str(raw.get("version", "0.0.0")),
        data_root=data_root(),
        storage_subdir=str(buffers.get("storage_subdir", "buffers")),
        preview_elements=int(buffers.get("preview_elements", 8)),
    )
