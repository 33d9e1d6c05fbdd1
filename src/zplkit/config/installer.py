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
import shutil
import sys
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "zplkit"
PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_PATH = PACKAGE_ROOT / "config" / "default.toml"
CONFIG_FILENAME = "config.toml"
CONFIG_ENV = "ZPLKIT_CONFIG"
XDG_CONFIG_ENV = "XDG_CONFIG_HOME"


def user_config_path() -> Path:
    """Location of the per-user config file (it may not exist yet)."""
    xdg_home = os.environ.get(XDG_CONFIG_ENV)
    if xdg_home:
        base = Path(xdg_home) / APP_NAME
    elif sys.platform == "darwin":
        base = Path.home() / ".config" / APP_NAME
    else:
        base = Path(user_config_dir(APP_NAME, appauthor=False))
    return base / CONFIG_FILENAME


def init_user_config() -> Path:
    """Copy the packaged defaults to the user config file unless one exists."""
    target = user_config_path()
    if target.exists():
        return target
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(DEFAULT_CONFIG_PATH, target)
    except OSError as exc:
        raise OSError(f"unable to create config file at {target}") from exc
    return target


def resolve_config_path(path: str | Path | None = None) -> Path:
    if path:
        return Path(path).expanduser()
    env_path = os.environ.get(CONFIG_ENV, "").strip()
    if env_path:
        return Path(env_path).expanduser()
    user_path = user_config_path()
    return user_path if user_path.exists() else DEFAULT_CONFIG_PATH
