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

"""Lenient conversions for label fields; bad input falls back to a default."""

from __future__ import annotations

import math
import numbers
import operator
from decimal import Decimal


def float_value(value: object, *, default: float) -> float:
    """Finite float from a real number (Decimal included) or numeric string, else default."""
    try:
        if isinstance(value, (numbers.Real, Decimal)):
            parsed = float(value)
        elif isinstance(value, str):
            parsed = float(value.strip())
        else:
            return default
    except (ValueError, OverflowError):
        return default
    return parsed if math.isfinite(parsed) else default


def int_value(value: object, *, default: int) -> int:
    """Like float_value, truncated toward zero ("2.9" gives 2)."""
    if isinstance(value, numbers.Integral):
        return operator.index(value)
    parsed = float_value(value, default=math.nan)
    return default if math.isnan(parsed) else int(parsed)


def text_value(value: object) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
