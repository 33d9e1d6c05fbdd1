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

import re
from dataclasses import dataclass

from ..layout.geometry import Dimensions

_PRINT_WIDTH_RE = re.compile(r"\^PW(\d+)")
_LABEL_LENGTH_RE = re.compile(r"\^LL(\d+)")
_FIELD_DATA_RE = re.compile(r"\^FD(.*?)\^FS")


class ZplFormatError(ValueError):
    pass


@dataclass(frozen=True)
class DocumentSummary:
    documents: int
    dimensions: Dimensions
    text_blocks: int
    barcode_blocks: int
    barcode_payloads: tuple[str, ...]


def parse_dimensions(text: str) -> Dimensions:
    """Read print width and label length from the first document header."""
    width_match = _PRINT_WIDTH_RE.search(text)
    if width_match is None:
        raise ZplFormatError("missing ^PW print width command")
    length_match = _LABEL_LENGTH_RE.search(text)
    if length_match is None:
        raise ZplFormatError("missing ^LL label length command")
    return Dimensions(width=int(width_match.group(1)), height=int(length_match.group(1)))


def inspect_document(text: str) -> DocumentSummary:
    lines = text.splitlines()
    documents = sum(1 for line in lines if line.startswith("^XA"))
    if documents == 0:
        raise ZplFormatError("no ^XA start format command found")

    payloads: list[str] = []
    text_blocks = 0
    barcode_blocks = 0
    expecting_payload = False
    for line in lines:
        if "^FB" in line:
            text_blocks += 1
        if "^BC" in line:
            barcode_blocks += 1
            expecting_payload = True
            continue
        if expecting_payload:
            match = _FIELD_DATA_RE.search(line)
            if match:
                payloads.append(match.group(1))
            expecting_payload = False

    return DocumentSummary(
        documents=documents,
        dimensions=parse_dimensions(text),
        text_blocks=text_blocks,
        barcode_blocks=barcode_blocks,
        barcode_payloads=tuple(payloads),
    )
