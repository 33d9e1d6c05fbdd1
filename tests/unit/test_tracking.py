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

from zplkit.tracking import classify_tracking_code, parse_tracking_code


class TestParseTrackingCode(unittest.TestCase):
    def test_recognized_codes(self) -> None:
        cases = (
            ('{"id":"4455","t":"lm"}', '{"id":"4455","t":"lm"}'),
            ("  {id\":\"x", '{id":"x'),
            ("123456789-01", "123456789-01"),
            ("br123456789", "BR123456789"),
            (" Gc00991 ", "GC00991"),
        )
        for raw, expected in cases:
            with self.subTest(raw=raw):
                self.assertEqual(parse_tracking_code(raw), expected)

    def test_rejected_values(self) -> None:
        for raw in (None, 42, "", "   ", "12345678-01", "1234567890-1", "XX123", "ABR1"):
            with self.subTest(raw=raw):
                self.assertIsNone(parse_tracking_code(raw))


class TestClassifyTrackingCode(unittest.TestCase):
    def test_carriers(self) -> None:
        cases = (
            ("{}", "mercado_livre"),
            ("987654321-00", "magazine_luiza"),
            ("BR1", "shopee"),
            ("gc1", "shein"),
        )
        for raw, carrier in cases:
            with self.subTest(raw=raw):
                result = classify_tracking_code(raw)
                self.assertIsNotNone(result)
                assert result is not None
                self.assertEqual(result.carrier, carrier)

    def test_unknown(self) -> None:
        self.assertIsNone(classify_tracking_code("ZZ"))


if __name__ == "__main__":
    unittest.main()
