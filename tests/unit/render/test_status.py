"""Status bar metadata formatting tests."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from tfm.render.status import STATUS_ERROR_MESSAGE, describe_path, format_size


class FormatSizeTests(unittest.TestCase):
    def test_units(self) -> None:
        self.assertEqual(format_size(0), "0B")
        self.assertEqual(format_size(1023), "1023B")
        self.assertEqual(format_size(1536), "1.5K")
        self.assertEqual(format_size(5 * 1024 * 1024), "5.0M")
        self.assertEqual(format_size(3 * 1024 ** 3), "3.0G")


class DescribePathTests(unittest.TestCase):
    def test_file_description_has_mode_and_size(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "a.txt"
            path.write_text("hello", encoding="utf-8")
            text = describe_path(path)
        self.assertTrue(text.startswith("-"))
        self.assertIn("5B", text)

    def test_directory_description_counts_items(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "x").write_text("x", encoding="utf-8")
            (root / "y").mkdir()
            text = describe_path(root)
        self.assertTrue(text.startswith("d"))
        self.assertIn("2 items", text)

    def test_missing_path_reports_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(describe_path(Path(tmp) / "gone"), STATUS_ERROR_MESSAGE)


if __name__ == "__main__":
    unittest.main()
