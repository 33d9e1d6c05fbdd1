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

"""Label data model and coercion helpers."""

from .models import (
    DEFAULT_COLUMN_GAP_MM,
    DEFAULT_COLUMNS,
    DEFAULT_HEIGHT_MM,
    DEFAULT_WIDTH_MM,
    LabelItem,
    LayoutConfig,
    resolve_layout,
)

__all__ = [
    "DEFAULT_COLUMNS",
    "DEFAULT_COLUMN_GAP_MM",
    "DEFAULT_HEIGHT_MM",
    "DEFAULT_WIDTH_MM",
    "LabelItem",
    "LayoutConfig",
    "resolve_layout",
]
