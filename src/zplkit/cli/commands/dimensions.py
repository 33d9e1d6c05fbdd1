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

import typer

from ...config import apply_label_overrides
from ...layout import compute_geometry, dots_to_mm
from ..api import build_kv_table, console, dots_text
from ..core.common import _ctx_flag, _load_ctx_config, _run_cli

_DIMENSIONS_HELP = (
    "Show the print width and label length (in dots) for a label layout.\n\n"
    "Values come from the same geometry used to build ZPL documents, so they\n"
    "match the ^PW/^LL header of generated files.\n\n"
    "Examples:\n"
    "  zplkit dimensions\n"
    "  zplkit dimensions --width 40 --height 25 --columns 2 --gap 3\n"
    "  zplkit dimensions --json\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_DIMENSIONS_HELP)(dimensions)


def dimensions(
    ctx: typer.Context,
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
    as_json: bool = typer.Option(
        False, "--json", help="Print the geometry as JSON.", rich_help_panel="Outputs"
    ),
) -> None:
    debug_value = _ctx_flag(ctx, "debug")

    def _run() -> None:
        config = _load_ctx_config(ctx)
        layout = apply_label_overrides(
            config, width_mm=width, height_mm=height, columns=columns, column_gap_mm=gap
        )
        geometry = compute_geometry(layout)
        if as_json:
            payload = {
                "width": geometry.total_width_dots,
                "height": geometry.height_dots,
                "columns": geometry.columns,
                "column_width": geometry.column_width_dots,
                "gap": geometry.gap_dots,
                "column_offsets": [
                    geometry.column_offset(index) for index in range(geometry.columns)
                ],
            }
            console.print_json(json.dumps(payload))
            return
        rows = [
            ("Print width (^PW)", dots_text(geometry.total_width_dots)),
            ("Label length (^LL)", dots_text(geometry.height_dots)),
            ("Columns", geometry.columns),
            ("Column width", dots_text(geometry.column_width_dots)),
            ("Column gap", dots_text(geometry.gap_dots)),
            ("Barcode top", dots_text(geometry.barcode_top_dots)),
            (
                "Physical size",
                f"{dots_to_mm(geometry.total_width_dots):g} x "
                f"{dots_to_mm(geometry.height_dots):g} mm",
            ),
        ]
        console.print(build_kv_table(rows, title="Label dimensions"))

    _run_cli(_run, debug=debug_value)
