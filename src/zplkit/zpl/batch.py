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
from collections.abc import Iterable, Mapping, Sequence

from ..core.coerce import int_value
from ..core.models import LabelItem, LayoutConfig, resolve_layout
from .assembler import generate_labels
from .fields import encode_sku

DEFAULT_FILE_PREFIX = "labels"
ZPL_EXTENSION = ".zpl"

_UNSAFE_FILENAME_RE = re.compile(r"[^A-Za-z0-9._-]+")


def expand_copies(items: Iterable[object], copies: int = 1) -> list[LabelItem]:
    """Repeat each item ``copies`` times, keeping input order. None entries are skipped."""
    count = int_value(copies, default=1)
    if count <= 0:
        return []
    expanded: list[LabelItem] = []
    for item in items:
        if item is None:
            continue
        label = LabelItem.from_value(item)
        expanded.extend([label] * count)
    return expanded


def chunk_rows(items: Sequence[LabelItem], columns: int) -> list[list[LabelItem]]:
    size = max(1, int_value(columns, default=1))
    return [list(items[index : index + size]) for index in range(0, len(items), size)]


def generate_batch(
    items: Iterable[object],
    config: LayoutConfig | Mapping[str, object] | None = None,
    *,
    copies: int = 1,
) -> str:
    """Generate one document per row of labels and join them.

    Returns an empty string when there is nothing to print.
    """
    layout = resolve_layout(config)
    labels = expand_copies(items, copies)
    rows = chunk_rows(labels, layout.column_count)
    return "\n".join(generate_labels(row, layout) for row in rows)


def default_file_name(
    items: Sequence[object],
    *,
    prefix: str = DEFAULT_FILE_PREFIX,
    extension: str = ZPL_EXTENSION,
) -> str:
    sku = ""
    if items:
        sku = _safe_file_stem(encode_sku(LabelItem.from_value(items[0]).sku))
    stem = f"{prefix}-{sku}" if sku else prefix
    return f"{stem}{extension}"


def _safe_file_stem(value: str) -> str:
    return _UNSAFE_FILENAME_RE.sub("_", value).strip("._")
