"""Rich rendering helpers for the buffer CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import islice
from pathlib import Path
from typing import Iterable

from rich import traceback
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..interfaces.data_type import DataType
from ..interfaces.memory_view import MemoryView

traceback.install()


@dataclass
class BufferReport:
    console: Console = field(default_factory=Console)

    def say(self, message: str, style: str = "cyan") -> None:
        self.console.print(f"[bold {style}]→[/] {message}")

    def success(self, message: str) -> None:
        self.console.print(Panel(message, title="Done", style="green"))

    def data_types(self, kinds: Iterable[DataType]) -> None:
        table = Table(title="Supported kinds")
        table.add_column("name")
        table.add_column("code", justify="right")
        table.add_column("bytes", justify="right")
        table.add_column("dtype")
        for kind in kinds:
            table.add_row(
                kind.name, str(kind.native_code), str(kind.item_size), kind.numpy_dtype.name
            )
        self.console.print(table)

    def summary(self, view: MemoryView, source: Path | None, preview: int) -> None:
        shown = [str(value) for value in islice(view, preview)]
        if view.size > preview:
            shown.append("…")
        lines = [
            f"[bold]kind[/]: {view.data_type.name} (code {view.data_type.native_code})",
            f"[bold]size[/]: {view.size}",
            f"[bold]last index[/]: {view.last_index}",
            f"[bold]hash[/]: {hash(view)}",
            f"[bold]elements[/]: {escape('[' + ', '.join(shown) + ']')}",
        ]
        title = escape(source.name) if source is not None else type(view).__name__
        self.console.print(Panel("\n".join(lines), title=title, style="bright_blue"))

    def listing(self, paths: Iterable[Path]) -> None:
        found = False
        for path in paths:
            found = True
            self.console.print(f"  {escape(str(path))}")
        if not found:
            self.say("No stored buffers yet.", style="yellow")

    def wrap_error(self, error: Exception) -> None:
        self.console.print(
            Panel(
                f"[bold red]{error.__class__.__name__} happened:[/]\n{escape(str(error))}",
                title="Oops",
                style="bright_red",
            )
        )
