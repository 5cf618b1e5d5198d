"""Command line entry point for creating and inspecting stored buffers."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Sequence

from rich.markup import escape

from .. import __version__
from ..errors import MemoryViewError
from ..interfaces.config import BufferConfig
from ..interfaces.data_type import DataType
from ..utils.buffer_io import list_buffer_files, load_memory_view, save_memory_view
from ..utils.config import load_config
from ..utils.paths import data_root, project_root
from ..views.factory import allocate
from .report import BufferReport

FILL_GENERATORS: dict[str, Callable[[int], int] | None] = {
    "zeros": None,
    "index": lambda i: i,
    "square": lambda i: i * i,
    "mod7": lambda i: i % 7,
}


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ndbuffer", description="Create and inspect primitive buffers."
    )
    parser.add_argument(
        "--config", type=Path, default=None, help="Path to an alternative config.yml."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("dtypes", help="List the supported primitive kinds.")

    allocate_parser = commands.add_parser("allocate", help="Create and store a buffer.")
    allocate_parser.add_argument(
        "--dtype", required=True, help="Kind name, e.g. INT32 or float64."
    )
    allocate_parser.add_argument("--size", type=int, required=True)
    allocate_parser.add_argument(
        "--fill", choices=tuple(FILL_GENERATORS), default="zeros", help="Element generator."
    )
    allocate_parser.add_argument(
        "--output", type=Path, required=True, help="Target .npy path (relative to data/)."
    )

    inspect_parser = commands.add_parser("inspect", help="Summarize a stored buffer.")
    inspect_parser.add_argument("path", type=Path)
    inspect_parser.add_argument(
        "--preview", type=int, default=None, help="Number of elements to show."
    )

    commands.add_parser("list", help="List stored buffers.")
    return parser.parse_args(argv)


def _resolve_config(path: Path | None) -> BufferConfig:
    if path is not None:
        return load_config(path)
    if (project_root() / "config.yml").exists():
        return load_config()
    return BufferConfig(version=__version__, data_root=data_root())


def _generator_for(kind: DataType, fill: str) -> Callable[[int], int | float] | None:
    generator = FILL_GENERATORS[fill]
    if generator is None or kind.is_integer:
        return generator
    return lambda index: float(generator(index))


def _run_allocate(args: argparse.Namespace, report: BufferReport) -> None:
    kind = DataType.of_name(args.dtype)
    view = allocate(args.size, kind, _generator_for(kind, args.fill))
    target = save_memory_view(view, args.output)
    report.success(f"Stored {view.size} {kind.name} elements at [bold green]{escape(str(target))}[/].")


def _run_inspect(args: argparse.Namespace, report: BufferReport, config: BufferConfig) -> None:
    view = load_memory_view(args.path)
    preview = config.preview_elements if args.preview is None else max(args.preview, 0)
    report.summary(view, Path(args.path), preview)


def main(argv: Sequence[str] | None = None, report: BufferReport | None = None) -> int:
    args = _parse_args(argv)
    report = report or BufferReport()
    try:
        config = _resolve_config(args.config)
        if args.command == "dtypes":
            report.data_types(DataType)
        elif args.command == "allocate":
            _run_allocate(args, report)
        elif args.command == "inspect":
            _run_inspect(args, report, config)
        elif args.command == "list":
            report.listing(list_buffer_files(config=config))
    except (MemoryViewError, FileNotFoundError, ValueError) as error:
        report.wrap_error(error)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    sys.exit(main())
