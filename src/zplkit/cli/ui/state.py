#!/usr/bin/env python3
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from rich.console import Console
from rich.theme import Theme

THEME = Theme(
    {
        "dots": "bold cyan",
        "payload": "green",
        "warning": "yellow",
        "error": "red",
        "muted": "dim",
    }
)


def stream_is_tty(stream: TextIO | None) -> bool:
    if stream is None:
        return False
    try:
        return bool(stream.isatty())
    except (OSError, ValueError, AttributeError):
        return False


def _console(*, stderr: bool) -> Console:
    # Terminal detection uses the process streams, even when stdout is redirected.
    stream = sys.__stderr__ if stderr else sys.__stdout__
    return Console(stderr=stderr, theme=THEME, force_terminal=stream_is_tty(stream) or None)


@dataclass
class UIContext:
    console: Console = field(default_factory=lambda: _console(stderr=False))
    console_err: Console = field(default_factory=lambda: _console(stderr=True))
    quiet: bool = False

    def apply(self, *, no_color: bool, quiet: bool) -> None:
        self.quiet = quiet
        for target in (self.console, self.console_err):
            target.no_color = no_color


DEFAULT_CONTEXT = UIContext()


def get_context() -> UIContext:
    return DEFAULT_CONTEXT
