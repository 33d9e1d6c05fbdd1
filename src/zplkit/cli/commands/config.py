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

import os
import shlex
import subprocess
from pathlib import Path

import typer
from rich.markup import escape

from ...config import AppConfig, load_app_config, resolve_config_path
from ..api import build_kv_table, console
from ..core.common import _ctx_flag, _ctx_value, _run_cli

_CONFIG_HELP = (
    "Show the active label settings and where they come from.\n\n"
    "Lookup order: --config, $ZPLKIT_CONFIG, the user config file, then the\n"
    "packaged defaults. Use --edit to open the file ($VISUAL/$EDITOR, or the\n"
    "system default application).\n\n"
    "Examples:\n"
    "  zplkit config\n"
    "  zplkit config --print-path\n"
    "  zplkit config --edit --editor nano\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_CONFIG_HELP)(config)


def config(
    ctx: typer.Context,
    print_path: bool = typer.Option(
        False,
        "--print-path",
        help="Print only the resolved config path.",
        rich_help_panel="Outputs",
    ),
    edit: bool = typer.Option(
        False, "--edit", help="Open the config file for editing.", rich_help_panel="Edit"
    ),
    editor: str | None = typer.Option(
        None,
        "--editor",
        "-e",
        help="Editor command for --edit ('default' uses the system opener).",
        rich_help_panel="Edit",
    ),
) -> None:
    quiet_value = _ctx_flag(ctx, "quiet")
    debug_value = _ctx_flag(ctx, "debug")

    def _run() -> None:
        path = resolve_config_path(_ctx_value(ctx, "config"))
        if print_path:
            console.print(str(path), soft_wrap=True)
            return
        if edit:
            _edit_file(path, editor=editor, quiet=quiet_value)
            return
        app_config = load_app_config(path)
        table = build_kv_table(_settings_rows(app_config), title=escape(str(path)))
        console.print(table)

    _run_cli(_run, debug=debug_value)


def _settings_rows(app_config: AppConfig) -> list[tuple[str, object]]:
    label = app_config.label
    return [
        ("label.width_mm", f"{label.width_mm:g}"),
        ("label.height_mm", f"{label.height_mm:g}"),
        ("label.columns", label.columns),
        ("label.column_gap_mm", f"{label.column_gap_mm:g}"),
        ("batch.copies", app_config.batch.copies),
        ("output.file_prefix", app_config.output.file_prefix),
        ("output.directory", app_config.output.directory or "(current directory)"),
    ]


def _edit_file(path: Path, *, editor: str | None, quiet: bool) -> None:
    target = path.expanduser()
    if not target.exists():
        raise FileNotFoundError(f"config file not found: {target}")
    command = _editor_command(editor)
    if not quiet:
        console.print(f"[muted]editing {target}[/muted]")
    if command is None:
        typer.launch(str(target))
    else:
        subprocess.run([*command, str(target)], check=False)


def _editor_command(editor: str | None) -> list[str] | None:
    choice = (editor or os.environ.get("VISUAL") or os.environ.get("EDITOR") or "").strip()
    if choice.lower() in {"", "default", "system"}:
        return None
    return shlex.split(choice, posix=os.name != "nt")
