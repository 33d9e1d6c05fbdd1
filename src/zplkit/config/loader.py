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

import math
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable, TypeVar

from ..core.models import (
    DEFAULT_COLUMN_GAP_MM,
    DEFAULT_COLUMNS,
    DEFAULT_HEIGHT_MM,
    DEFAULT_WIDTH_MM,
    LayoutConfig,
)
from ..zpl.batch import DEFAULT_FILE_PREFIX
from .installer import resolve_config_path

_T = TypeVar("_T")

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class BatchDefaults:
    copies: int = 1


@dataclass(frozen=True)
class OutputDefaults:
    file_prefix: str = DEFAULT_FILE_PREFIX
    directory: str | None = None


@dataclass(frozen=True)
class UiDefaults:
    quiet: bool = False
    no_color: bool = False


@dataclass(frozen=True)
class AppConfig:
    path: Path
    label: LayoutConfig = field(default_factory=LayoutConfig)
    batch: BatchDefaults = field(default_factory=BatchDefaults)
    output: OutputDefaults = field(default_factory=OutputDefaults)
    ui: UiDefaults = field(default_factory=UiDefaults)


def load_app_config(path: str | Path | None = None) -> AppConfig:
    config_path = resolve_config_path(path)
    data = _load_toml(config_path)
    return AppConfig(
        path=config_path,
        label=_parse_label(_get_dict(data, "label")),
        batch=_parse_batch(_get_dict(data, "batch")),
        output=_parse_output(_get_dict(data, "output")),
        ui=_parse_ui(_get_dict(data, "ui")),
    )


def apply_label_overrides(
    config: AppConfig,
    *,
    width_mm: float | None = None,
    height_mm: float | None = None,
    columns: int | None = None,
    column_gap_mm: float | None = None,
) -> LayoutConfig:
    """Merge command-line overrides over the configured label layout."""
    label = config.label
    if width_mm is not None:
        label = replace(label, width_mm=_positive_float(width_mm, field="--width"))
    if height_mm is not None:
        label = replace(label, height_mm=_positive_float(height_mm, field="--height"))
    if columns is not None:
        label = replace(label, columns=_positive_int(columns, field="--columns"))
    if column_gap_mm is not None:
        label = replace(label, column_gap_mm=_non_negative_float(column_gap_mm, field="--gap"))
    return label


def _parse_label(cfg: dict[str, object]) -> LayoutConfig:
    return LayoutConfig(
        width_mm=_optional(cfg, "width_mm", DEFAULT_WIDTH_MM, _positive_float, "label"),
        height_mm=_optional(cfg, "height_mm", DEFAULT_HEIGHT_MM, _positive_float, "label"),
        columns=_optional(cfg, "columns", DEFAULT_COLUMNS, _positive_int, "label"),
        column_gap_mm=_optional(
            cfg, "column_gap_mm", DEFAULT_COLUMN_GAP_MM, _non_negative_float, "label"
        ),
    )


def _parse_batch(cfg: dict[str, object]) -> BatchDefaults:
    return BatchDefaults(copies=_optional(cfg, "copies", 1, _positive_int, "batch"))


def _parse_output(cfg: dict[str, object]) -> OutputDefaults:
    prefix = _parse_optional_str(cfg.get("file_prefix"), field="output.file_prefix")
    directory = _parse_optional_str(cfg.get("directory"), field="output.directory")
    return OutputDefaults(file_prefix=prefix or DEFAULT_FILE_PREFIX, directory=directory)


def _parse_ui(cfg: dict[str, object]) -> UiDefaults:
    return UiDefaults(
        quiet=_parse_bool(cfg.get("quiet"), field="ui.quiet", default=False),
        no_color=_parse_bool(cfg.get("no_color"), field="ui.no_color", default=False),
    )


def _optional(
    cfg: dict[str, object],
    key: str,
    default: _T,
    parser: Callable[..., _T],
    section: str,
) -> _T:
    value = cfg.get(key)
    if value is None:
        return default
    return parser(value, field=f"{section}.{key}")


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_optional_str(value: object, *, field: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    normalized = value.strip()
    return normalized or None


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    word = str(value).strip().lower() if isinstance(value, (int, str)) else ""
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"{field} must be a boolean")


def _number(value: object, *, field: str, integer: bool) -> float:
    """Parse a TOML number or numeric string; booleans are rejected."""
    kind = "an integer" if integer else "a number"
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(f"{field} must be {kind}")
    try:
        parsed = float(value.strip()) if isinstance(value, str) else float(value)
    except ValueError as exc:
        raise ValueError(f"{field} must be {kind}") from exc
    if not math.isfinite(parsed):
        raise ValueError(f"{field} must be a finite number")
    if integer and not parsed.is_integer():
        raise ValueError(f"{field} must be {kind}")
    return parsed


def _positive_int(value: object, *, field: str) -> int:
    parsed = int(_number(value, field=field, integer=True))
    if parsed < 1:
        raise ValueError(f"{field} must be a positive integer")
    return parsed


def _positive_float(value: object, *, field: str) -> float:
    parsed = _number(value, field=field, integer=False)
    if parsed <= 0:
        raise ValueError(f"{field} must be greater than 0")
    return parsed


def _non_negative_float(value: object, *, field: str) -> float:
    parsed = _number(value, field=field, integer=False)
    if parsed < 0:
        raise ValueError(f"{field} must be 0 or greater")
    return parsed
