#!/usr/bin/env python3
from __future__ import annotations

import typer

from .commands import (
    config as config_command,
    dimensions as dimensions_command,
    generate as generate_command,
    inspect as inspect_command,
    preview as preview_command,
    tracking as tracking_command,
)


def register(app: typer.Typer) -> None:
    generate_command.register(app)
    preview_command.register(app)
    dimensions_command.register(app)
    inspect_command.register(app)
    tracking_command.register(app)
    config_command.register(app)
