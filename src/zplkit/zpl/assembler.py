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

from collections.abc import Mapping, Sequence

from ..core.models import LabelItem, LayoutConfig
from ..layout.geometry import Geometry, compute_geometry
from . import commands
from .fields import encode_name, encode_sku


def generate_labels(
    items: Sequence[object] | None,
    config: LayoutConfig | Mapping[str, object] | None = None,
) -> str:
    """Build one ZPL document holding up to ``columns`` labels side by side.

    Items past the column count are dropped. A None entry keeps its column empty.
    """
    geometry = compute_geometry(config)
    segments = header_segments(geometry)
    for index, item in enumerate(list(items or ())[: geometry.columns]):
        if item is None:
            continue
        segments.extend(body_segments(geometry, index, LabelItem.from_value(item)))
    segments.append(commands.END_FORMAT)
    return "\n".join(segments)


def header_segments(geometry: Geometry) -> list[str]:
    return [
        commands.START_FORMAT,
        commands.print_width(geometry.total_width_dots),
        commands.label_length(geometry.height_dots),
    ]


def body_segments(geometry: Geometry, index: int, item: LabelItem) -> list[str]:
    x = geometry.column_offset(index) + geometry.horizontal_padding_dots
    text_origin = commands.field_origin(x, geometry.top_padding_dots)
    text_block = commands.field_block(
        geometry.text_box_width_dots,
        line_spacing=geometry.line_spacing_dots,
    )
    barcode_origin = commands.field_origin(x, geometry.barcode_top_dots)
    return [
        commands.change_font(),
        f"{text_origin}{text_block}{commands.field_data(encode_name(item.name))}",
        commands.barcode_defaults(geometry.barcode_height_dots),
        f"{barcode_origin}{commands.code128(geometry.barcode_height_dots)}",
        commands.field_data(encode_sku(item.sku)),
    ]
