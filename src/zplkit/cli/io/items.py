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

import csv
import io
import json
import sys
from pathlib import Path

from ...core.coerce import int_value
from ...core.models import LabelItem

SUPPORTED_SUFFIXES = (".csv", ".json")
STDIN_MARKER = "-"


def load_items(path: str | Path, *, input_format: str | None = None) -> list[LabelItem]:
    """Read label items from a CSV or JSON file ("-" reads stdin).

    A per-row ``copies`` column repeats that row; missing sku/name become empty.
    """
    text, suffix = _read_source(path)
    fmt = (input_format or suffix).lower().lstrip(".")
    if fmt == "csv":
        return _items_from_csv(text)
    if fmt == "json":
        return _items_from_json(text)
    raise ValueError(f"unsupported items format: {fmt or 'unknown'} (use csv or json)")


def _read_source(path: str | Path) -> tuple[str, str]:
    if str(path) == STDIN_MARKER:
        return sys.stdin.read(), ""
    source = Path(path).expanduser()
    if not source.exists():
        raise FileNotFoundError(f"items file not found: {source}")
    return source.read_text(encoding="utf-8-sig"), source.suffix


def _items_from_csv(text: str) -> list[LabelItem]:
    reader = csv.DictReader(io.StringIO(text))
    fields = {name.strip().lower() for name in reader.fieldnames or () if name}
    if "sku" not in fields:
        raise ValueError("items CSV must have a header row with a sku column")
    items: list[LabelItem] = []
    for row in reader:
        normalized = {
            (key or "").strip().lower(): value for key, value in row.items() if key is not None
        }
        items.extend(_expand_row(normalized))
    return items


def _items_from_json(text: str) -> list[LabelItem]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"items JSON is invalid: {exc.msg} (line {exc.lineno})") from exc
    if isinstance(data, dict):
        data = data.get("items")
    if not isinstance(data, list):
        raise ValueError("items JSON must be a list or an object with an items list")
    items: list[LabelItem] = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise ValueError(f"items[{index}] must be an object")
        items.extend(_expand_row(entry))
    return items


def _expand_row(row: dict[str, object]) -> list[LabelItem]:
    copies = int_value(row.get("copies"), default=1)
    return [LabelItem.from_value(row)] * max(0, copies)
