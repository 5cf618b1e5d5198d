"""Shared fixtures for the ndbuffer test suite."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pytest
from rich.console import Console

from ndbuffer import DataType, allocate
from ndbuffer.cli.report import BufferReport


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property-based test")
    config.addinivalue_line("markers", "cli: mark test as exercising the command line")


@dataclass(frozen=True)
class ForeignTag:
    """A data type tag produced outside the DataType enum."""

    native_code: int
    name: str


# Python value that belongs to each kind.
SAMPLE_VALUES = {
    DataType.INT8: 5,
    DataType.INT16: -300,
    DataType.INT32: 70_000,
    DataType.INT64: 2**40,
    DataType.FLOAT32: 2.5,
    DataType.FLOAT64: -0.125,
}


@pytest.fixture
def sample_values() -> dict:
    return dict(SAMPLE_VALUES)


@pytest.fixture
def make_tag():
    """Build tags that are not DataType members."""
    return ForeignTag


@pytest.fixture
def unknown_tag() -> ForeignTag:
    return ForeignTag(native_code=42, name="COMPLEX128")


@pytest.fixture
def int32_squares():
    return allocate(3, DataType.INT32, lambda i: i * i)


@pytest.fixture
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the data directory at a temporary folder."""
    root = tmp_path / "data"
    monkeypatch.setenv("NDBUFFER_DATA_ROOT", str(root))
    return root


@pytest.fixture
def recording_report() -> BufferReport:
    return BufferReport(console=Console(record=True, width=160, color_system=None))
