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
from rich.markup import escape

from ...tracking import classify_tracking_code
from ..api import build_list_table, console
from ..core.common import _ctx_flag, _run_cli

_TRACKING_HELP = (
    "Recognize marketplace tracking codes read from shipping labels.\n\n"
    "Exits with status 1 when any code is not recognized.\n\n"
    "Examples:\n"
    "  zplkit tracking BR1234567890 123456789-01\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_TRACKING_HELP)(tracking)


def tracking(
    ctx: typer.Context,
    codes: list[str] = typer.Argument(..., help="Scanned values to classify."),
) -> None:
    debug_value = _ctx_flag(ctx, "debug")

    def _run() -> int:
        rows: list[tuple[str, str, str]] = []
        unknown = 0
        for raw in codes:
            result = classify_tracking_code(raw)
            if result is None:
                unknown += 1
                rows.append((escape(raw), "-", "[error]unrecognized[/error]"))
            else:
                code = f"[payload]{escape(result.code)}[/payload]"
                rows.append((escape(raw), code, result.carrier))
        console.print(build_list_table("Tracking codes", ("Input", "Code", "Carrier"), rows))
        return 1 if unknown else 0

    _run_cli(_run, debug=debug_value)
