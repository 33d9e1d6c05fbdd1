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

import json
from pathlib import Path

import typer
from rich.markup import escape

from ...layout import query_dimensions
from ...zpl import inspect_document
from ..api import build_kv_table, console, dots_text
from ..core.common import _ctx_flag, _load_ctx_config, _run_cli
from ..core.log import _warn

_INSPECT_HELP = (
    "Summarize a ZPL file: header dimensions, documents and barcode payloads.\n\n"
    "Pass the layout options to check the header against an expected layout.\n\n"
    "Examples:\n"
    "  zplkit inspect labels-ABC123.zpl\n"
    "  zplkit inspect labels.zpl --expect-width 40 --expect-height 25 --expect-columns 2\n"
)


def register(app: typer.Typer) -> None:
    app.command(name="inspect", help=_INSPECT_HELP)(inspect_file)


def inspect_file(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="ZPL file to inspect."),
    expect_width: float | None = typer.Option(
        None, "--expect-width", help="Expected label width in mm.", rich_help_panel="Check"
    ),
    expect_height: float | None = typer.Option(
        None, "--expect-height", help="Expected label height in mm.", rich_help_panel="Check"
    ),
    expect_columns: int = typer.Option(
        1, "--expect-columns", help="Expected labels per row.", rich_help_panel="Check"
    ),
    expect_gap: float = typer.Option(
        3.0, "--expect-gap", help="Expected gap in mm.", rich_help_panel="Check"
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print the summary as JSON.", rich_help_panel="Outputs"
    ),
) -> None:
    debug_value = _ctx_flag(ctx, "debug")

    def _run() -> int:
        _load_ctx_config(ctx)
        summary = inspect_document(path.expanduser().read_text(encoding="utf-8"))
        if as_json:
            console.print_json(
                json.dumps(
                    {
                        "documents": summary.documents,
                        "width": summary.dimensions.width,
                        "height": summary.dimensions.height,
                        "text_blocks": summary.text_blocks,
                        "barcode_blocks": summary.barcode_blocks,
                        "barcode_payloads": list(summary.barcode_payloads),
                    }
                )
            )
        else:
            rows = [
                ("Documents", summary.documents),
                ("Print width (^PW)", dots_text(summary.dimensions.width)),
                ("Label length (^LL)", dots_text(summary.dimensions.height)),
                ("Text blocks", summary.text_blocks),
                ("Barcodes", summary.barcode_blocks),
                ("Payloads", ", ".join(summary.barcode_payloads) or "-"),
            ]
            console.print(build_kv_table(rows, title=escape(str(path))))

        if expect_width is None or expect_height is None:
            return 0
        expected = query_dimensions(expect_width, expect_height, expect_columns, expect_gap)
        if expected != summary.dimensions:
            _warn(
                f"header is {summary.dimensions.width}x{summary.dimensions.height} dots, "
                f"expected {expected.width}x{expected.height}",
            )
            return 1
        return 0

    _run_cli(_run, debug=debug_value)
