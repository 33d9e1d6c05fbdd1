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

from ..core.models import LayoutConfig
from ..layout.geometry import Geometry, compute_geometry
from ..layout.units import dots_to_mm
from ..zpl.commands import BARCODE_MODULE_WIDTH, DEFAULT_FONT_HEIGHT, TEXT_BLOCK_LINES

PT_TO_MM = 0.3527777778
MIN_PAGE_MM = 1.0


@dataclass(frozen=True)
class ColumnBox:
    index: int
    x: float
    width: float


@dataclass(frozen=True)
class PreviewLayout:
    """Preview geometry in millimeters, derived from the printer geometry."""

    page_w: float
    page_h: float
    columns: tuple[ColumnBox, ...]
    text_x: float
    text_y: float
    text_w: float
    text_lines: int
    font_size_pt: float
    line_height: float
    barcode_y: float
    barcode_h: float
    module_w: float


def compute_preview_layout(
    config: LayoutConfig | Mapping[str, object] | None = None,
) -> PreviewLayout:
    return preview_layout_from_geometry(compute_geometry(config))


def preview_layout_from_geometry(geometry: Geometry) -> PreviewLayout:
    column_w = dots_to_mm(geometry.column_width_dots)
    columns = tuple(
        ColumnBox(index=index, x=dots_to_mm(geometry.column_offset(index)), width=column_w)
        for index in range(geometry.columns)
    )
    font_height = dots_to_mm(DEFAULT_FONT_HEIGHT)
    return PreviewLayout(
        page_w=max(MIN_PAGE_MM, dots_to_mm(geometry.total_width_dots)),
        page_h=max(MIN_PAGE_MM, dots_to_mm(geometry.height_dots)),
        columns=columns,
        text_x=dots_to_mm(geometry.horizontal_padding_dots),
        text_y=dots_to_mm(geometry.top_padding_dots),
        text_w=dots_to_mm(geometry.text_box_width_dots),
        text_lines=TEXT_BLOCK_LINES,
        font_size_pt=font_height / PT_TO_MM,
        line_height=font_height + dots_to_mm(geometry.line_spacing_dots),
        barcode_y=dots_to_mm(geometry.barcode_top_dots),
        barcode_h=dots_to_mm(geometry.barcode_height_dots),
        module_w=dots_to_mm(BARCODE_MODULE_WIDTH),
    )
