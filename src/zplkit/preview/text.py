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

from collections.abc import Callable

from fpdf import FPDF

Measure = Callable[[str], float]


def fit_lines(pdf: FPDF, text: str, max_width: float, max_lines: int) -> list[str]:
    """Word-wrap text into at most max_lines lines, like a ZPL ^FB field block.

    Overflowing text is dropped, the way the printer clips a block.
    """
    if max_lines <= 0 or not text:
        return []
    lines: list[str] = []
    for word in text.split():
        for piece in _split_word(pdf.get_string_width, word, max_width):
            if lines and pdf.get_string_width(f"{lines[-1]} {piece}") <= max_width:
                lines[-1] = f"{lines[-1]} {piece}"
            else:
                lines.append(piece)
            if len(lines) > max_lines:
                return lines[:max_lines]
    return lines


def _split_word(measure: Measure, word: str, max_width: float) -> list[str]:
    if measure(word) <= max_width:
        return [word]
    pieces: list[str] = []
    current = ""
    for char in word:
        if current and measure(current + char) > max_width:
            pieces.append(current)
            current = char
        else:
            current += char
    if current:
        pieces.append(current)
    return pieces


def latin1_safe(text: str) -> str:
    # Core PDF fonts only cover Latin-1.
    return text.encode("latin-1", "replace").decode("latin-1")
