#!/usr/bin/env python3
from __future__ import annotations

from ..api import console_err
from ..ui.state import get_context


def _warn(message: str, *, quiet: bool = False) -> None:
    if quiet or get_context().quiet:
        return
    console_err.print(f"[warning]Warning:[/warning] {message}")
