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

"""Marketplace tracking-code recognition for scanned shipping labels."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

Carrier = Literal["mercado_livre", "magazine_luiza", "shopee", "shein"]

MAGAZINE_LUIZA_PATTERN = re.compile(r"^[0-9]{9}-[0-9]{2}$")
_PREFIX_CARRIERS: dict[str, Carrier] = {"BR": "shopee", "GC": "shein"}


@dataclass(frozen=True)
class TrackingCode:
    code: str
    carrier: Carrier


def classify_tracking_code(raw: object) -> TrackingCode | None:
    if not isinstance(raw, str):
        return None
    trimmed = raw.strip()
    if not trimmed:
        return None
    if trimmed.startswith("{"):
        return TrackingCode(code=trimmed, carrier="mercado_livre")
    if MAGAZINE_LUIZA_PATTERN.match(trimmed):
        return TrackingCode(code=trimmed, carrier="magazine_luiza")
    upper = trimmed.upper()
    for prefix, carrier in _PREFIX_CARRIERS.items():
        if upper.startswith(prefix):
            return TrackingCode(code=upper, carrier=carrier)
    return None


def parse_tracking_code(raw: object) -> str | None:
    """Return the normalized tracking code, or None when the value is not recognized."""
    result = classify_tracking_code(raw)
    return result.code if result else None
