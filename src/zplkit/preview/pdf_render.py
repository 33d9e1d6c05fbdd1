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

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, cast

from fpdf import FPDF

from ..core.models import LabelItem, LayoutConfig, resolve_layout
from ..zpl.batch import chunk_rows, expand_copies
from ..zpl.fields import encode_name, encode_sku
from .layout import ColumnBox, PreviewLayout, compute_preview_layout
from .text import fit_lines, latin1_safe

PREVIEW_FONT = "Helvetica"
PLACEHOLDER_TEXT = "EMPTY COLUMN"
OUTLINE_GRAY = 190
PLACEHOLDER_GRAY = 150
SKU_GAP_MM = 0.5


def render_preview_pdf(
    items: Iterable[object],
    config: LayoutConfig | Mapping[str, object] | None,
    output_path: str | Path,
    *,
    copies: int = 1,
    title: str | None = None,
) -> int:
    """Draw one page per row of labels and write the PDF. Returns the page count."""
    pdf = build_preview_pdf(items, config, copies=copies, title=title)
    pdf.output(str(output_path))
    return pdf.pages_count


def build_preview_pdf(
    items: Iterable[object],
    config: LayoutConfig | Mapping[str, object] | None,
    *,
    copies: int = 1,
    title: str | None = None,
) -> FPDF:
    layout_config = resolve_layout(config)
    layout = compute_preview_layout(layout_config)
    rows: list[list[LabelItem]] = chunk_rows(
        expand_copies(items, copies), layout_config.column_count
    )
    if not rows:
        rows = [[]]

    pdf = FPDF(unit="mm", format=cast(Any, (layout.page_w, layout.page_h)))
    pdf.set_auto_page_break(False)
    pdf.set_margins(0, 0, 0)
    if title:
        pdf.set_title(title)
    for row in rows:
        pdf.add_page()
        for column in layout.columns:
            item = row[column.index] if column.index < len(row) else None
            _draw_column(pdf, layout, column, item)
    return pdf


def _draw_column(
    pdf: FPDF,
    layout: PreviewLayout,
    column: ColumnBox,
    item: LabelItem | None,
) -> None:
    pdf.set_draw_color(OUTLINE_GRAY)
    pdf.set_line_width(0.1)
    pdf.rect(column.x, 0, column.width, layout.page_h)
    if item is None:
        _draw_placeholder(pdf, layout, column)
        return
    _draw_name(pdf, layout, column, encode_name(item.name))
    _draw_barcode(pdf, layout, column, encode_sku(item.sku))


def _draw_placeholder(pdf: FPDF, layout: PreviewLayout, column: ColumnBox) -> None:
    pdf.set_font(PREVIEW_FONT, size=max(1.0, layout.font_size_pt * 0.75))
    pdf.set_text_color(PLACEHOLDER_GRAY)
    pdf.set_xy(column.x, 0)
    pdf.cell(column.width, layout.page_h, PLACEHOLDER_TEXT, align="C")
    pdf.set_text_color(0)


def _draw_name(pdf: FPDF, layout: PreviewLayout, column: ColumnBox, name: str) -> None:
    pdf.set_font(PREVIEW_FONT, style="B", size=layout.font_size_pt)
    lines = fit_lines(pdf, latin1_safe(name), layout.text_w, layout.text_lines)
    y = layout.text_y
    for line in lines:
        pdf.set_xy(column.x + layout.text_x, y)
        pdf.cell(layout.text_w, layout.line_height, line)
        y += layout.line_height


def _draw_barcode(pdf: FPDF, layout: PreviewLayout, column: ColumnBox, sku: str) -> None:
    x = column.x + layout.text_x
    step = layout.module_w * 2
    bars = int(layout.text_w // step) if step > 0 else 0
    pdf.set_fill_color(0)
    for index in range(bars):
        pdf.rect(x + index * step, layout.barcode_y, layout.module_w, layout.barcode_h, style="F")

    pdf.set_font(PREVIEW_FONT, size=max(1.0, layout.font_size_pt * 0.75))
    pdf.set_xy(x, layout.barcode_y + layout.barcode_h + SKU_GAP_MM)
    pdf.cell(layout.text_w, layout.line_height, latin1_safe(sku), align="C")
