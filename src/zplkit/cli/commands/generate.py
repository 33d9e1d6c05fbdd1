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
from ...zpl import default_file_name, generate_batch
from ..api import console
from ..core.common import _ctx_flag, _load_ctx_config, _run_cli
from ..core.log import _warn
from ..io.items import load_items
from ..io.outputs import _resolve_output_path, _write_text_output

_GENERATE_HELP = (
    "Generate a ZPL document for the items in a CSV or JSON file.\n\n"
    "Items are printed row by row, --columns labels per row; every row is one\n"
    "^XA...^XZ document.\n\n"
    "Examples:\n"
    "  zplkit generate products.csv\n"
    "  zplkit generate products.json --columns 2 --copies 3 -o labels.zpl\n"
    "  zplkit generate products.csv -o - | nc printer.local 9100\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_GENERATE_HELP)(generate)


def generate(
    ctx: typer.Context,
    items_path: str = typer.Argument(
        ..., metavar="ITEMS", help="CSV/JSON items file, or - for stdin."
    ),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output .zpl path, or - for stdout (defaults to labels-<first sku>.zpl).",
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
            _warn("no items found; nothing to print", quiet=quiet)
            return
        document = generate_batch(
            items, layout, copies=copies if copies is not None else config.batch.copies
        )
        target = _resolve_output_path(
            output,
            directory=config.output.directory,
            default_name=default_file_name(items, prefix=config.output.file_prefix),
        )
        written = _write_text_output(target, document, quiet=quiet)
        if written is not None and not quiet:
            console.print(str(written), soft_wrap=True)

    _run_cli(_run, debug=debug_value)
