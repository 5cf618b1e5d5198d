"""Configuration interfaces and data structures."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from typing import Any


@dataclass(frozen=True)
class BufferConfig:
    """Runtime configuration for buffer storage and inspection tooling."""

    version: str
    data_root: Path
    storage_subdir: str = "buffers"
    preview_elements: int = 8

    def __post_init__(self) -> None:
        if self.preview_elements < 0:
            raise ValueError(
                f"preview_elements must be non-negative, got {self.preview_elements}"
            )

    @property
    def storage_dir(self) -> Path:
        return self.data_root / self.storage_subdir

    def __getitem__(self, key: str) -> Any:
        return getattr(self, key)

    def get(self, key: str, default: Any = None) -> Any:
        return getattr(self, key, default)
