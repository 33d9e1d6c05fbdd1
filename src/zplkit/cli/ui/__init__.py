#!/usr/bin/env python3
from __future__ import annotations

from collections.abc import Sequence

from rich import box
from rich.table import Table

from .state import THEME, UIContext, get_context, stream_is_tty

DEFAULT_CONTEXT = get_context()
console = DEFAULT_CONTEXT.console
console_err = DEFAULT_CONTEXT.console_err


def configure_ui(*, no_color: bool, quiet: bool = False, context: UIContext | None = None) -> None:
    (context or DEFAULT_CONTEXT).apply(no_color=no_color, quiet=quiet)


def dots_text(value: int) -> str:
    return f"[dots]{value}[/dots] dots"


def build_kv_table(rows: Sequence[tuple[str, object]], *, title: str | None = None) -> Table:
    table = Table(title=title, show_header=False, box=box.SIMPLE, show_lines=False)
    table.add_column("Field", style="bold", no_wrap=True)
    table.add_column("Value")
    for key, value in rows:
        table.add_row(str(key), str(value))
    return table


def build_list_table(title: str, columns: Sequence[str], rows: Sequence[Sequence[object]]) -> Table:
    table = Table(title=title, box=box.SIMPLE_HEAD)
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(*(str(value) for value in row))
    return table


__all__ = [
    "THEME",
    "build_kv_table",
    "build_list_table",
    "configure_ui",
    "console",
    "console_err",
    "dots_text",
    "stream_is_tty",
]
