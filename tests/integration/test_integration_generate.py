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

import json
import unittest
from unittest import mock

from typer.testing import CliRunner

from zplkit.cli import app
from zplkit.layout import query_dimensions
from zplkit.zpl import inspect_document, parse_dimensions
from tests.test_support import isolated_config_env, strip_ansi, temp_files

ITEMS_JSON = json.dumps(
    {
        "items": [
            {"sku": "CAM-001", "name": "Camiseta algodão branca tamanho M", "copies": 2},
            {"sku": "CAN-77", "name": "Caneca"},
            {"sku": "  PAD-3  ", "name": "x" * 80},
        ]
    }
)


class TestIntegrationGenerate(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()

    def _invoke(self, args: list[str]):
        with mock.patch("zplkit.cli.app.run_startup", return_value=False):
            return self.runner.invoke(app, ["--no-color", *args])

    def test_generate_inspect_and_preview(self) -> None:
        layout_args = ["--width", "50", "--height", "25", "--columns", "3", "--gap", "2"]
        expected = query_dimensions(50, 25, 3, 2)
        with isolated_config_env(), temp_files({"items.json": ITEMS_JSON}) as paths:
            zpl_path = paths["_dir"] / "labels.zpl"
            pdf_path = paths["_dir"] / "labels.pdf"

            generated = self._invoke(
                ["generate", str(paths["items.json"]), "-o", str(zpl_path), *layout_args]
            )
            self.assertEqual(generated.exit_code, 0, generated.output)
            document = zpl_path.read_text(encoding="utf-8")

            inspected = self._invoke(
                [
                    "inspect",
                    str(zpl_path),
                    "--json",
                    "--expect-width",
                    "50",
                    "--expect-height",
                    "25",
                    "--expect-columns",
                    "3",
                    "--expect-gap",
                    "2",
                ]
            )
            self.assertEqual(inspected.exit_code, 0, inspected.output)

            previewed = self._invoke(
                ["preview", str(paths["items.json"]), "-o", str(pdf_path), *layout_args]
            )
            self.assertEqual(previewed.exit_code, 0, previewed.output)
            self.assertTrue(pdf_path.read_bytes().startswith(b"%PDF-"))
            self.assertIn("2 page(s)", strip_ansi(previewed.output))

        self.assertEqual(parse_dimensions(document), expected)
        summary = inspect_document(document)
        self.assertEqual(summary.documents, 2)
        self.assertEqual(summary.barcode_payloads, ("CAM-001", "CAM-001", "CAN-77", "PAD-3"))
        self.assertIn("^FDCAMISETA ALGODÃO BRANCA TAMANHO M^FS", document)
        self.assertIn("^FD" + "X" * 57 + "...^FS", document)

        payload = json.loads(strip_ansi(inspected.output))
        self.assertEqual(payload["width"], expected.width)
        self.assertEqual(payload["height"], expected.height)
        self.assertEqual(payload["text_blocks"], 4)

    def test_generate_reads_stdin(self) -> None:
        with isolated_config_env():
            with mock.patch("zplkit.cli.app.run_startup", return_value=False):
                result = self.runner.invoke(
                    app,
                    ["--no-color", "generate", "-", "--format", "csv", "-o", "-"],
                    input="sku,name\nABC123,Produto\n",
                )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertTrue(result.output.startswith("^XA\n^PW320\n^LL160\n"))
        self.assertIn("^FDABC123^FS", result.output)


if __name__ == "__main__":
    unittest.main()
