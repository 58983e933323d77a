"""End-to-end key sequences against a session built on a real directory tree."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from tfm.input.modes import Mode
from tfm.ops.clipboard import ClipOperation
from tfm.ops.undo import CutAction, MoveAction
from tfm.runtime.app import build_session


class SessionScenarioTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        base = Path(self._tmp.name)
        self.root = base / "files"
        self.root.mkdir()
        (self.root / "a.txt").write_text("alpha", encoding="utf-8")
        (self.root / "b").mkdir()
        (self.root / "b" / "inside.txt").write_text("inside", encoding="utf-8")
        (self.root / "c.txt").write_text("charlie", encoding="utf-8")
        config_path = base / "config" / "config.json"
        patcher = mock.patch("tfm.runtime.config.CONFIG_PATH", config_path)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.controller = build_session(self.root, jump_command=("jumper",))
        self.addCleanup(self._tmp.cleanup)
        self.addCleanup(self.controller.teardown)

    def press(self, *keys: str) -> None:
        for key in keys:
            self.controller.handle_key(key)

    def names(self) -> list[str]:
        return [entry.name for entry in self.controller.view().entries]

    def cursor_name(self) -> str | None:
        entry = self.controller.view().current_entry()
        return entry.name if entry is not None else None


class NavigationScenarioTests(SessionScenarioTestCase):
    def test_enter_directory_then_return_to_it(self) -> None:
        self.assertEqual(self.names(), ["b", "a.txt", "c.txt"])
        self.press("G")
        self.assertEqual(self.cursor_name(), "c.txt")
        self.press("g", "g")
        self.assertEqual(self.cursor_name(), "b")

        self.press("ENTER")
        self.assertEqual(self.controller.view().current_path, self.root / "b")
        self.assertEqual(self.names(), ["inside.txt"])
        self.assertEqual(self.controller.view().cursor, 0)

        self.press("h")
        self.assertEqual(self.controller.view().current_path, self.root)
        self.assertEqual(self.cursor_name(), "b")

    def test_search_prompt_moves_cursor(self) -> None:
        self.press("/", "c", "ENTER")
        self.assertEqual(self.cursor_name(), "c.txt")
        self.assertEqual(self.controller.view().mode, Mode.NORMAL)

    def test_jump_prompt_enters_directory_from_lookup(self) -> None:
        with mock.patch("tfm.runtime.external.subprocess.run") as run:
            run.return_value.stdout = f"{self.root / 'b'}\n"
            self.press("z", "b", "ENTER")
        self.assertEqual(run.call_args.args[0], ["jumper", "b"])
        self.assertEqual(self.controller.view().current_path, self.root / "b")
        self.assertEqual(self.controller.view().cursor, 0)


class FileOperationScenarioTests(SessionScenarioTestCase):
    def test_cut_then_paste_in_other_directory(self) -> None:
        self.press("G", "d", "d")
        view = self.controller.view()
        self.assertEqual(view.clipboard.entry.name, "c.txt")
        self.assertEqual(view.clipboard.operation, ClipOperation.CUT)
        self.assertEqual(self.names(), ["b", "a.txt"])

        self.press("g", "g", "l", "p", "p")
        self.assertEqual(self.names(), ["c.txt", "inside.txt"])
        self.assertFalse((self.root / "c.txt").exists())
        self.assertEqual((self.root / "b" / "c.txt").read_text(encoding="utf-8"), "charlie")
        actions = self.controller.engine.ledger.actions()
        self.assertEqual([type(action) for action in actions], [CutAction, MoveAction])
        self.assertTrue(self.controller.view().clipboard.is_empty)

    def test_delete_then_undo_restores_snapshot(self) -> None:
        self.press("j")
        before = self.controller.view()
        self.press("D", "D")
        self.assertEqual(self.names(), ["b", "c.txt"])
        self.press("u")
        after = self.controller.view()
        self.assertEqual(after.entries, before.entries)
        self.assertEqual(after.cursor, before.cursor)
        self.assertEqual((self.root / "a.txt").read_text(encoding="utf-8"), "alpha")

    def test_cut_prefix_followed_by_shift_d_deletes(self) -> None:
        self.press("j", "d", "D")
        self.assertEqual(self.names(), ["b", "c.txt"])
        self.assertTrue(self.controller.view().clipboard.is_empty)
        self.assertTrue(self.controller.engine.trash.path is not None)

    def test_copy_paste_and_undo_leaves_source(self) -> None:
        self.press("j", "y", "y", "p", "p")
        self.assertEqual(self.names(), ["b", "a.txt", "a_copy.txt", "c.txt"])
        self.assertEqual(self.cursor_name(), "a_copy.txt")
        self.press("u")
        self.assertEqual(self.names(), ["b", "a.txt", "c.txt"])
        self.assertEqual((self.root / "a.txt").read_text(encoding="utf-8"), "alpha")

    def test_prompt_modes_never_run_file_commands(self) -> None:
        for opener in ("/", "a", "z"):
            self.press(opener, "d", "d", "y", "y", "p", "p", "D", "D", "u", "ESC")
        self.assertEqual(self.names(), ["b", "a.txt", "c.txt"])
        self.assertTrue(self.controller.view().clipboard.is_empty)
        self.assertEqual(len(self.controller.engine.ledger), 0)

    def test_teardown_removes_trash(self) -> None:
        self.press("D", "D")
        trash_path = self.controller.engine.trash.path
        self.assertTrue(trash_path.is_dir())
        self.controller.teardown()
        self.assertFalse(trash_path.exists())


if __name__ == "__main__":
    unittest.main()
