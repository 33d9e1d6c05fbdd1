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

from collections.abc import Mapping
from dataclasses import dataclass

from .coerce import float_value, int_value, text_value

DEFAULT_WIDTH_MM = 40.0
DEFAULT_HEIGHT_MM = 20.0
DEFAULT_COLUMNS = 1
DEFAULT_COLUMN_GAP_MM = 3.0


@dataclass(frozen=True)
class LabelItem:
    sku: str = ""
    name: str = ""

    @classmethod
    def from_value(cls, value: object) -> "LabelItem":
        """Build an item from a LabelItem, a mapping, or an object with sku/name attributes.

        Missing fields become empty strings; nothing here raises.
        """
        if isinstance(value, LabelItem):
            return value
        if isinstance(value, Mapping):
            return cls(sku=text_value(value.get("sku")), name=text_value(value.get("name")))
        return cls(
            sku=text_value(getattr(value, "sku", None)),
            name=text_value(getattr(value, "name", None)),
        )


@dataclass(frozen=True)
class LayoutConfig:
    width_mm: float = DEFAULT_WIDTH_MM
    height_mm: float = DEFAULT_HEIGHT_MM
    columns: int = DEFAULT_COLUMNS
    column_gap_mm: float = DEFAULT_COLUMN_GAP_MM

    @property
    def column_count(self) -> int:
        return max(1, int_value(self.columns, default=DEFAULT_COLUMNS))

    @classmethod
    def coerce(
        cls,
        width_mm: object = DEFAULT_WIDTH_MM,
        height_mm: object = DEFAULT_HEIGHT_MM,
        columns: object = DEFAULT_COLUMNS,
        column_gap_mm: object = DEFAULT_COLUMN_GAP_MM,
    ) -> "LayoutConfig":
        return cls(
            width_mm=float_value(width_mm, default=DEFAULT_WIDTH_MM),
            height_mm=float_value(height_mm, default=DEFAULT_HEIGHT_MM),
            columns=max(1, int_value(columns, default=DEFAULT_COLUMNS)),
            column_gap_mm=float_value(column_gap_mm, default=DEFAULT_COLUMN_GAP_MM),
        )


def resolve_layout(config: LayoutConfig | Mapping[str, object] | None) -> LayoutConfig:
    """Return a normalized LayoutConfig for any accepted config shape."""
    if config is None:
        return LayoutConfig()
    if isinstance(config, LayoutConfig):
        return LayoutConfig.coerce(
            config.width_mm, config.height_mm, config.columns, config.column_gap_mm
        )
    return LayoutConfig.coerce(
        config.get("width_mm", DEFAULT_WIDTH_MM),
        config.get("height_mm", DEFAULT_HEIGHT_MM),
        config.get("columns", DEFAULT_COLUMNS),
        config.get("column_gap_mm", DEFAULT_COLUMN_GAP_MM),
    )
