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
from typing import NamedTuple

from ..core.models import (
    DEFAULT_COLUMN_GAP_MM,
    DEFAULT_COLUMNS,
    DEFAULT_HEIGHT_MM,
    DEFAULT_WIDTH_MM,
    LayoutConfig,
    resolve_layout,
)
from .units import mm_to_dots

# Fixed placement policy (millimeters).
HORIZONTAL_PADDING_MM = 2.0
TOP_PADDING_MM = 2.0
BOTTOM_PADDING_MM = 3.0
BARCODE_HEIGHT_MM = 8.0
# Minimum distance between the top padding and the barcode, reserved for the text block.
TEXT_REGION_MM = 4.0
LINE_SPACING_MM = 1.5


class Dimensions(NamedTuple):
    width: int
    height: int


@dataclass(frozen=True)
class Geometry:
    columns: int
    column_width_dots: int
    gap_dots: int
    total_width_dots: int
    height_dots: int
    horizontal_padding_dots: int
    top_padding_dots: int
    bottom_padding_dots: int
    text_box_width_dots: int
    barcode_height_dots: int
    barcode_top_dots: int
    line_spacing_dots: int

    def column_offset(self, index: int) -> int:
        return index * (self.column_width_dots + self.gap_dots)

    @property
    def dimensions(self) -> Dimensions:
        return Dimensions(width=self.total_width_dots, height=self.height_dots)


def compute_geometry(config: LayoutConfig | Mapping[str, object] | None = None) -> Geometry:
    layout = resolve_layout(config)
    columns = layout.column_count

    column_width = max(0, mm_to_dots(layout.width_mm))
    height = max(0, mm_to_dots(layout.height_mm))
    gap = max(0, mm_to_dots(layout.column_gap_mm)) if columns > 1 else 0
    total_width = column_width * columns + gap * (columns - 1)

    horizontal_padding = mm_to_dots(HORIZONTAL_PADDING_MM)
    top_padding = mm_to_dots(TOP_PADDING_MM)
    bottom_padding = mm_to_dots(BOTTOM_PADDING_MM)
    text_box_width = max(1, column_width - horizontal_padding * 2)
    barcode_height = mm_to_dots(BARCODE_HEIGHT_MM)
    # Floor keeps the barcode below the text region; short labels push it into the
    # bottom padding instead.
    barcode_top = max(
        top_padding + mm_to_dots(TEXT_REGION_MM),
        height - bottom_padding - barcode_height,
    )

    return Geometry(
        columns=columns,
        column_width_dots=column_width,
        gap_dots=gap,
        total_width_dots=total_width,
        height_dots=height,
        horizontal_padding_dots=horizontal_padding,
        top_padding_dots=top_padding,
        bottom_padding_dots=bottom_padding,
        text_box_width_dots=text_box_width,
        barcode_height_dots=barcode_height,
        barcode_top_dots=barcode_top,
        line_spacing_dots=mm_to_dots(LINE_SPACING_MM),
    )


def query_dimensions(
    width_mm: LayoutConfig | Mapping[str, object] | float | None = DEFAULT_WIDTH_MM,
    height_mm: object = DEFAULT_HEIGHT_MM,
    columns: object = DEFAULT_COLUMNS,
    column_gap_mm: object = DEFAULT_COLUMN_GAP_MM,
) -> Dimensions:
    """Return the document width/height in dots without generating protocol text.

    Accepts either a LayoutConfig (or mapping) as the only argument, or the four
    loose values.
    """
    if width_mm is None or isinstance(width_mm, (LayoutConfig, Mapping)):
        return compute_geometry(width_mm).dimensions
    config = LayoutConfig.coerce(width_mm, height_mm, columns, column_gap_mm)
    return compute_geometry(config).dimensions
