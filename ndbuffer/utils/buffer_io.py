"""Helpers for listing, saving, and loading stored primitive buffers."""

from __future__ import annotations

from pathlib import Path
from typing import List

import numpy as np

from ..interfaces.config import BufferConfig
from ..interfaces.data_type import DataType
from ..interfaces.memory_view import MemoryView
from ..views.factory import from_sequence
from .paths import resolve_data_path


BUFFER_SUBDIR = ("buffers",)


def buffers_dir(config: BufferConfig | None = None) -> Path:
    """Return the directory where buffers are stored, creating it if needed."""

    path = config.storage_dir if config is not None else resolve_data_path(*BUFFER_SUBDIR)
    path.mkdir(parents=True, exist_ok=True)
    return path


def list_buffer_files(pattern: str = "*.npy", config: BufferConfig | None = None) -> List[Path]:
    """List stored buffers matching a pattern."""

    return sorted(buffers_dir(config).glob(pattern))


def _coerce_path(path: str | Path) -> Path:
    target = Path(path).expanduser()
    if not target.is_absolute():
        target = resolve_data_path(*target.parts)
    return target


def load_memory_view(path: str | Path) -> MemoryView:
    """Load a flat ``.npy`` buffer into a holder of the matching kind.

    Files written with a non-native byte order are converted on load.
    """

    target = _coerce_path(path)
    if not target.exists():
        raise FileNotFoundError(f"Buffer file not found: {target}")
    if target.suffix != ".npy":
        raise ValueError(f"Unsupported buffer format: {target.suffix}")

    array = np.load(target, allow_pickle=False)
    if array.ndim != 1:
        raise ValueError(f"Expected a flat buffer in {target}, got shape {array.shape}")
    kind = DataType.of_numpy(array.dtype)
    return from_sequence(array.astype(kind.numpy_dtype, copy=False), kind)


def save_memory_view(view: MemoryView, path: str | Path) -> Path:
    """Persist the raw buffer of ``view`` as ``.npy`` and return the written path."""

    target = _coerce_path(path)
    if target.suffix != ".npy":
        target = target.with_suffix(".npy")
    target.parent.mkdir(parents=True, exist_ok=True)
    np.save(target, view.data, allow_pickle=False)
    return target
