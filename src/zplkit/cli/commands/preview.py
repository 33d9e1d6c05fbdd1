#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

import typer

from ...config import apply_label_overrides
from ...preview import render_preview_pdf
from ...zpl import default_file_name
from ..api import console
from ..core.common import _ctx_flag, _load_ctx_config, _run_cli
from ..core.log import _warn
from ..io.items import load_items
from ..io.outputs import _resolve_output_path

_PREVIEW_HELP = (
    "Render a PDF preview of the labels, one page per row.\n\n"
    "The page size matches the ZPL print width and label length, and columns\n"
    "without an item are drawn as empty placeholders.\n\n"
    "Examples:\n"
    "  zplkit preview products.csv\n"
    "  zplkit preview products.json --columns 2 -o preview.pdf\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_PREVIEW_HELP)(preview)


def preview(
    ctx: typer.Context,
    items_path: str = typer.Argument(
        ..., metavar="ITEMS", help="CSV/JSON items file, or - for stdin."
    ),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output PDF path (defaults to labels-<first sku>.pdf).",
        rich_help_panel="Outputs",
    ),
    input_format: str | None = typer.Option(
        None,
        "--format",
        "-f",
        help="Items format (csv/json); inferred from the file suffix by default.",
        rich_help_panel="Inputs",
    ),
    width: float | None = typer.Option(
        None, "--width", help="Label width in mm.", rich_help_panel="Layout"
    ),
    height: float | None = typer.Option(
        None, "--height", help="Label height in mm.", rich_help_panel="Layout"
    ),
    columns: int | None = typer.Option(
        None, "--columns", help="Labels per row.", rich_help_panel="Layout"
    ),
    gap: float | None = typer.Option(
        None, "--gap", help="Gap between columns in mm.", rich_help_panel="Layout"
    ),
    copies: int | None = typer.Option(
        None,
        "--copies",
        min=1,
        help="Copies printed for every item.",
        rich_help_panel="Layout",
    ),
) -> None:
    quiet_value = _ctx_flag(ctx, "quiet")
    debug_value = _ctx_flag(ctx, "debug")

    def _run() -> None:
        config = _load_ctx_config(ctx)
        quiet = quiet_value or config.ui.quiet
        layout = apply_label_overrides(
            config, width_mm=width, height_mm=height, columns=columns, column_gap_mm=gap
        )
        items = load_items(items_path, input_format=input_format)
        if not items:
            _warn("no items found; preview shows empty columns only", quiet=quiet)
        output_path = _resolve_output_path(
            output,
            directory=config.output.directory,
            default_name=default_file_name(
                items, prefix=config.output.file_prefix, extension=".pdf"
            ),
        )
        pages = render_preview_pdf(
            items,
            layout,
            output_path,
            copies=copies if copies is not None else config.batch.copies,
            title=f"{layout.width_mm:g} x {layout.height_mm:g} mm labels",
        )
        if not quiet:
            console.print(f"{output_path} [muted]({pages} page(s))[/muted]")

    _run_cli(_run, debug=debug_value)
