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

"""PDF preview of label rows, drawn from the printer geometry."""

from .layout import ColumnBox, PreviewLayout, compute_preview_layout, preview_layout_from_geometry
from .pdf_render import PLACEHOLDER_TEXT, build_preview_pdf, render_preview_pdf

__all__ = [
    "ColumnBox",
    "PLACEHOLDER_TEXT",
    "PreviewLayout",
    "build_preview_pdf",
    "compute_preview_layout",
    "preview_layout_from_geometry",
    "render_preview_pdf",
]
