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

# 203 dpi thermal printers address roughly 8 dots per millimeter.
DOTS_PER_MM = 8


def mm_to_dots(value_mm: float) -> int:
    """Convert millimeters to printer dots, rounding half away from zero.

    Sizes with no finite dot count (NaN, or too large for a float) give 0.
    """
    try:
        scaled = float(value_mm) * DOTS_PER_MM
    except OverflowError:
        return 0
    if not math.isfinite(scaled):
        return 0
    return int(math.copysign(math.floor(abs(scaled) + 0.5), scaled))


def dots_to_mm(dots: int) -> float:
    return dots / DOTS_PER_MM
