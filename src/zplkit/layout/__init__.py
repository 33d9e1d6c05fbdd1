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

"""Millimeter to dot conversion and label geometry."""

from .geometry import (
    BARCODE_HEIGHT_MM,
    BOTTOM_PADDING_MM,
    HORIZONTAL_PADDING_MM,
    LINE_SPACING_MM,
    TEXT_REGION_MM,
    TOP_PADDING_MM,
    Dimensions,
    Geometry,
    compute_geometry,
    query_dimensions,
)
from .units import DOTS_PER_MM, dots_to_mm, mm_to_dots

__all__ = [
    "BARCODE_HEIGHT_MM",
    "BOTTOM_PADDING_MM",
    "DOTS_PER_MM",
    "Dimensions",
    "Geometry",
    "HORIZONTAL_PADDING_MM",
    "LINE_SPACING_MM",
    "TEXT_REGION_MM",
    "TOP_PADDING_MM",
    "compute_geometry",
    "dots_to_mm",
    "mm_to_dots",
    "query_dimensions",
]
