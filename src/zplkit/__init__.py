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

"""Thermal label layout and ZPL generation."""

from .core import LabelItem, LayoutConfig
from .layout import Dimensions, Geometry, compute_geometry, mm_to_dots, query_dimensions
from .tracking import parse_tracking_code
from .zpl import generate_batch, generate_labels, inspect_document, parse_dimensions

__all__ = [
    "Dimensions",
    "Geometry",
    "LabelItem",
    "LayoutConfig",
    "compute_geometry",
    "generate_batch",
    "generate_labels",
    "inspect_document",
    "mm_to_dots",
    "parse_dimensions",
    "parse_tracking_code",
    "query_dimensions",
]
