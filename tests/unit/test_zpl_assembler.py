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

import unittest
from types import SimpleNamespace

from zplkit.core.models import LabelItem, LayoutConfig
from zplkit.zpl.assembler import generate_labels
from tests.test_support import TEST_NAME, TEST_SKU, count_commands, make_items, zpl_lines

SINGLE_LABEL = "\n".join(
    [
        "^XA",
        "^PW320",
        "^LL160",
        "^CF0,24",
        "^FO16,16^FB288,2,12,L,0^FDPRODUTO TESTE^FS",
        "^BY2,2,64",
        "^FO16,72^BCN,64,Y,N,N",
        "^FDABC123^FS",
        "^XZ",
    ]
)


class TestGenerateLabels(unittest.TestCase):
    def test_single_label_document(self) -> None:
        config = LayoutConfig(width_mm=40, height_mm=20, columns=1, column_gap_mm=0)
        document = generate_labels([LabelItem(sku=TEST_SKU, name=TEST_NAME)], config)
        self.assertEqual(document, SINGLE_LABEL)
        self.assertEqual(count_commands(document, "^FB"), 1)
        self.assertEqual(count_commands(document, "^BC"), 1)

    def test_deterministic(self) -> None:
        config = LayoutConfig(width_mm=57, height_mm=32, columns=3, column_gap_mm=2)
        items = make_items(3)
        self.assertEqual(generate_labels(items, config), generate_labels(list(items), config))

    def test_two_columns_offsets(self) -> None:
        config = LayoutConfig(width_mm=40, height_mm=25, columns=2, column_gap_mm=3)
        lines = zpl_lines(generate_labels(make_items(2), config))
        self.assertEqual(lines[:3], ["^XA", "^PW664", "^LL200"])
        self.assertIn("^FO16,16^FB288,2,12,L,0^FDPRODUCT 0^FS", lines)
        self.assertIn("^FO360,16^FB288,2,12,L,0^FDPRODUCT 1^FS", lines)
        self.assertIn("^FO16,112^BCN,64,Y,N,N", lines)
        self.assertIn("^FO360,112^BCN,64,Y,N,N", lines)
        self.assertEqual(lines[-1], "^XZ")

    def test_block_order(self) -> None:
        lines = zpl_lines(generate_labels(make_items(1)))
        body = lines[3:-1]
        self.assertEqual(len(body), 5)
        self.assertTrue(body[0].startswith("^CF"))
        self.assertIn("^FB", body[1])
        self.assertTrue(body[2].startswith("^BY"))
        self.assertIn("^BC", body[3])
        self.assertEqual(body[4], "^FDSKU-000^FS")

    def test_empty_items_emit_header_and_footer_only(self) -> None:
        config = LayoutConfig(columns=3)
        document = generate_labels([], config)
        self.assertEqual(zpl_lines(document), ["^XA", "^PW1008", "^LL160", "^XZ"])
        self.assertEqual(count_commands(document, "^BC"), 0)
        self.assertEqual(count_commands(document, "^FD"), 0)

    def test_none_items_behave_like_empty(self) -> None:
        self.assertEqual(generate_labels(None), "\n".join(["^XA", "^PW320", "^LL160", "^XZ"]))

    def test_extra_items_are_dropped(self) -> None:
        document = generate_labels(make_items(5), LayoutConfig(columns=2))
        self.assertEqual(count_commands(document, "^BC"), 2)
        self.assertNotIn("SKU-002", document)

    def test_fewer_items_than_columns(self) -> None:
        document = generate_labels(make_items(1), LayoutConfig(columns=3))
        self.assertEqual(count_commands(document, "^FB"), 1)
        self.assertIn("^PW1008", document)

    def test_none_entry_leaves_its_column_empty(self) -> None:
        config = LayoutConfig(columns=2, column_gap_mm=3)
        document = generate_labels([None, LabelItem(sku="B", name="b")], config)
        self.assertEqual(count_commands(document, "^BC"), 1)
        self.assertIn("^FO360,16^FB", document)
        self.assertNotIn("^FO16,16", document)

    def test_columns_below_one_are_coerced(self) -> None:
        for columns in (0, -3):
            with self.subTest(columns=columns):
                document = generate_labels(make_items(2), LayoutConfig(columns=columns))
                self.assertIn("^PW320", document)
                self.assertEqual(count_commands(document, "^BC"), 1)

    def test_malformed_items_never_raise(self) -> None:
        items = [{"name": "only name"}, {"sku": None}, SimpleNamespace(sku=" Z9 ")]
        document = generate_labels(items, {"columns": 3})
        lines = zpl_lines(document)
        self.assertIn("^FDONLY NAME^FS", "\n".join(lines))
        self.assertEqual(lines.count("^FD^FS"), 2)
        self.assertIn("^FDZ9^FS", lines)

    def test_oversized_numbers_never_raise(self) -> None:
        cases = (
            (LayoutConfig(width_mm=1e308), "^PW0"),
            (LayoutConfig(width_mm=10**400), "^PW320"),
            ({"height_mm": 10**400}, "^PW320"),
        )
        for config, header in cases:
            with self.subTest(config=config):
                document = generate_labels(make_items(1), config)
                self.assertEqual(zpl_lines(document)[1], header)

    def test_long_name_is_truncated_in_field(self) -> None:
        document = generate_labels([LabelItem(sku="S", name="n" * 80)])
        self.assertIn(f"^FD{'N' * 57}...^FS", document)

    def test_no_trailing_newline(self) -> None:
        self.assertFalse(generate_labels(make_items(1)).endswith("\n"))


if __name__ == "__main__":
    unittest.main()
