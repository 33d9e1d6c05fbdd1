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

import sys
from pathlib import Path

from ..api import console_err

STDOUT_MARKER = "-"


def _write_text_output(path: str | Path | None, text: str, *, quiet: bool) -> Path | None:
    if path is None or str(path) == STDOUT_MARKER:
        sys.stdout.write(text)
        if text and not text.endswith("\n"):
            sys.stdout.write("\n")
        return None
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with open(target, "w", encoding="utf-8", newline="\n") as handle:
        handle.write(text)
    if not quiet:
        console_err.print(f"[dim]- wrote {target}[/dim]")
    return target


def _resolve_output_path(output: str | None, *, directory: str | None, default_name: str) -> str:
    if output:
        return output
    base = Path(directory).expanduser() if directory else Path.cwd()
    return str(base / default_name)
