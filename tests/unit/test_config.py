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

import tempfile
import unittest
from pathlib import Path

from zplkit.config import (
    CONFIG_ENV,
    DEFAULT_CONFIG_PATH,
    apply_label_overrides,
    init_user_config,
    load_app_config,
    resolve_config_path,
    user_config_path,
)
from zplkit.core.models import LayoutConfig
from tests.test_support import isolated_config_env, temp_env


def _write_config(tmpdir: str, toml: str) -> Path:
    path = Path(tmpdir) / "config.toml"
    path.write_text(toml, encoding="utf-8")
    return path


class TestConfig(unittest.TestCase):
    def test_packaged_default_config(self) -> None:
        config = load_app_config(path=DEFAULT_CONFIG_PATH)
        self.assertEqual(config.label, LayoutConfig())
        self.assertEqual(config.batch.copies, 1)
        self.assertEqual(config.output.file_prefix, "labels")
        self.assertIsNone(config.output.directory)
        self.assertFalse(config.ui.quiet)
        self.assertFalse(config.ui.no_color)

    def test_load_app_config_parses_sections(self) -> None:
        toml = """
[label]
width_mm = "50"
height_mm = 25.4
columns = 2.0
column_gap_mm = 0

[batch]
copies = 3

[output]
file_prefix = "etiquetas"
directory = "  out  "

[ui]
quiet = "yes"
no_color = 1
"""
        with tempfile.TemporaryDirectory() as tmpdir:
            config = load_app_config(path=_write_config(tmpdir, toml))

        self.assertEqual(
            config.label,
            LayoutConfig(width_mm=50.0, height_mm=25.4, columns=2, column_gap_mm=0.0),
        )
        self.assertEqual(config.batch.copies, 3)
        self.assertEqual(config.output.file_prefix, "etiquetas")
        self.assertEqual(config.output.directory, "out")
        self.assertTrue(config.ui.quiet)
        self.assertTrue(config.ui.no_color)

    def test_missing_sections_use_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config = load_app_config(path=_write_config(tmpdir, "[label]\ncolumns = 3\n"))
        self.assertEqual(config.label, LayoutConfig(columns=3))
        self.assertEqual(config.batch.copies, 1)

    def test_invalid_values_name_the_field(self) -> None:
        cases = (
            ("[label]\ncolumns = 0\n", "label.columns"),
            ("[label]\ncolumns = 1.5\n", "label.columns"),
            ("[label]\nwidth_mm = -1\n", "label.width_mm"),
            ('[label]\nheight_mm = "tall"\n', "label.height_mm"),
            ("[label]\ncolumn_gap_mm = -0.5\n", "label.column_gap_mm"),
            ("[batch]\ncopies = true\n", "batch.copies"),
            ("[output]\ndirectory = 3\n", "output.directory"),
            ('[ui]\nquiet = "maybe"\n', "ui.quiet"),
        )
        for toml, field in cases:
            with self.subTest(field=field, toml=toml):
                with tempfile.TemporaryDirectory() as tmpdir:
                    with self.assertRaises(ValueError) as ctx:
                        load_app_config(path=_write_config(tmpdir, toml))
                self.assertIn(field, str(ctx.exception))

    def test_apply_label_overrides(self) -> None:
        config = load_app_config(path=DEFAULT_CONFIG_PATH)
        layout = apply_label_overrides(config, width_mm=50, columns=2)
        self.assertEqual(layout, LayoutConfig(width_mm=50.0, columns=2))
        self.assertEqual(apply_label_overrides(config), config.label)

    def test_apply_label_overrides_rejects_bad_values(self) -> None:
        config = load_app_config(path=DEFAULT_CONFIG_PATH)
        with self.assertRaises(ValueError) as ctx:
            apply_label_overrides(config, columns=0)
        self.assertIn("--columns", str(ctx.exception))
        with self.assertRaises(ValueError):
            apply_label_overrides(config, column_gap_mm=-1)


class TestConfigResolution(unittest.TestCase):
    def test_explicit_path_wins(self) -> None:
        self.assertEqual(resolve_config_path("custom.toml"), Path("custom.toml"))

    def test_env_path(self) -> None:
        with isolated_config_env():
            with temp_env({CONFIG_ENV: "/tmp/from-env.toml"}):
                self.assertEqual(resolve_config_path(), Path("/tmp/from-env.toml"))

    def test_falls_back_to_packaged_default(self) -> None:
        with isolated_config_env():
            self.assertEqual(resolve_config_path(), DEFAULT_CONFIG_PATH)

    def test_init_user_config_copies_default(self) -> None:
        with isolated_config_env() as xdg:
            path = init_user_config()
            self.assertEqual(path, xdg / "zplkit" / "config.toml")
            self.assertEqual(path, user_config_path())
            self.assertEqual(
                path.read_text(encoding="utf-8"),
                DEFAULT_CONFIG_PATH.read_text(encoding="utf-8"),
            )
            self.assertEqual(resolve_config_path(), path)

    def test_init_user_config_keeps_existing_file(self) -> None:
        with isolated_config_env() as xdg:
            target = xdg / "zplkit" / "config.toml"
            target.parent.mkdir(parents=True)
            target.write_text("[label]\ncolumns = 4\n", encoding="utf-8")
            init_user_config()
            self.assertEqual(load_app_config().label.columns, 4)


if __name__ == "__main__":
    unittest.main()
