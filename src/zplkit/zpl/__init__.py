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

"""ZPL label document generation."""

from .assembler import generate_labels
from .batch import chunk_rows, default_file_name, expand_copies, generate_batch
from .fields import MAX_NAME_CHARS, encode_name, encode_sku, truncate
from .inspect import DocumentSummary, ZplFormatError, inspect_document, parse_dimensions

__all__ = [
    "DocumentSummary",
    "MAX_NAME_CHARS",
    "ZplFormatError",
    "chunk_rows",
    "default_file_name",
    "encode_name",
    "encode_sku",
    "expand_copies",
    "generate_batch",
    "generate_labels",
    "inspect_document",
    "parse_dimensions",
    "truncate",
]
