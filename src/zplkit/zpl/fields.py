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

from ..core.coerce import text_value

MAX_NAME_CHARS = 60
ELLIPSIS = "..."


def truncate(text: str, max_length: int, *, marker: str = ELLIPSIS) -> str:
    """Cut text to max_length characters, ending with marker when shortened."""
    if len(text) <= max_length:
        return text
    keep = max(0, max_length - len(marker))
    return f"{text[:keep]}{marker}"[:max_length]


def encode_name(value: object) -> str:
    return truncate(text_value(value), MAX_NAME_CHARS).upper()


def encode_sku(value: object) -> str:
    # Barcode payload: case is preserved.
    return text_value(value).strip()
