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

"""ZPL II command vocabulary used by the assembler.

Numeric parameters are plain decimal integers in dots.
"""

from __future__ import annotations

START_FORMAT = "^XA"
END_FORMAT = "^XZ"
FIELD_SEPARATOR = "^FS"

DEFAULT_FONT = "0"
DEFAULT_FONT_HEIGHT = 24
TEXT_BLOCK_LINES = 2
TEXT_BLOCK_JUSTIFY = "L"

BARCODE_MODULE_WIDTH = 2
BARCODE_WIDE_RATIO = 2


def print_width(dots: int) -> str:
    return f"^PW{dots}"


def label_length(dots: int) -> str:
    return f"^LL{dots}"


def change_font(font: str = DEFAULT_FONT, height: int = DEFAULT_FONT_HEIGHT) -> str:
    return f"^CF{font},{height}"


def field_origin(x: int, y: int) -> str:
    return f"^FO{x},{y}"


def field_block(
    width: int,
    lines: int = TEXT_BLOCK_LINES,
    line_spacing: int = 0,
    justify: str = TEXT_BLOCK_JUSTIFY,
    hanging_indent: int = 0,
) -> str:
    return f"^FB{width},{lines},{line_spacing},{justify},{hanging_indent}"


def field_data(data: str) -> str:
    return f"^FD{data}{FIELD_SEPARATOR}"


def barcode_defaults(
    height: int,
    module_width: int = BARCODE_MODULE_WIDTH,
    ratio: int = BARCODE_WIDE_RATIO,
) -> str:
    return f"^BY{module_width},{ratio},{height}"


def code128(height: int) -> str:
    # Normal orientation, interpretation line below, no check digit.
    return f"^BCN,{height},Y,N,N"
