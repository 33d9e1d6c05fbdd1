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

from zplkit.zpl.fields import MAX_NAME_CHARS, encode_name, encode_sku, truncate


class TestTruncate(unittest.TestCase):
    def test_short_text_unchanged(self) -> None:
        self.assertEqual(truncate("abc", 5), "abc")
        self.assertEqual(truncate("abcde", 5), "abcde")

    def test_long_text_ends_with_marker_at_exact_length(self) -> None:
        self.assertEqual(truncate("abcdefgh", 6), "abc...")

    def test_limit_shorter_than_marker(self) -> None:
        self.assertEqual(truncate("abcdef", 2), "..")


class TestEncodeName(unittest.TestCase):
    def test_upper_cases(self) -> None:
        self.assertEqual(encode_name("Produto Teste"), "PRODUTO TESTE")

    def test_sixty_characters_unchanged_except_case(self) -> None:
        name = "a" * MAX_NAME_CHARS
        self.assertEqual(encode_name(name), "A" * MAX_NAME_CHARS)

    def test_long_names_truncate_to_sixty_with_ellipsis(self) -> None:
        for length in (61, 62, 100, 500):
            with self.subTest(length=length):
                encoded = encode_name("x" * length)
                self.assertEqual(len(encoded), 60)
                self.assertTrue(encoded.endswith("..."))
                self.assertEqual(encoded, "X" * 57 + "...")

    def test_missing_name_is_empty(self) -> None:
        self.assertEqual(encode_name(None), "")

    def test_non_string_name(self) -> None:
        self.assertEqual(encode_name(12345), "12345")


class TestEncodeSku(unittest.TestCase):
    def test_strips_whitespace_and_keeps_case(self) -> None:
        self.assertEqual(encode_sku("  abC-12 \t"), "abC-12")

    def test_missing_sku_is_empty(self) -> None:
        self.assertEqual(encode_sku(None), "")

    def test_numeric_sku(self) -> None:
        self.assertEqual(encode_sku(789), "789")


if __name__ == "__main__":
    unittest.main()
