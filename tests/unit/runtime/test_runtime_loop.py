"""Main loop tests with fake terminal, renderer and key source."""

from __future__ import annotations

import contextlib
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from tfm.runtime.app import build_session
from tfm.runtime.loop import RuntimeLoopTiming, run_main_loop


class FakeTerminal:
    def __init__(self) -> None:
        self.writes: list[str] = []
        self.events: list[str] = []

    def write(self, text: str) -> None:
        self.writes.append(text)

    @contextlib.contextmanager
    def raw_mode(self):
        self.events.append("enter")
        try:
            yield
        finally:
            self.events.append("exit")


class FakeRenderer:
    def __init__(self) -> None:
        self.frames = 0

    def render_frame(self, view, width: int, height: int) -> str:
        self.frames += 1
        return f"frame {self.frames} cursor={view.cursor}"


class RunMainLoopTests(unittest.TestCase):
    def _session(self, root: Path):
        config_path = root / "cfg" / "config.json"
        with mock.patch("tfm.runtime.config.CONFIG_PATH", config_path):
            return build_session(root / "files")

    def test_loop_renders_dirty_frames_and_exits_on_quit(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "files").mkdir()
            for name in ("a", "b"):
                (root / "files" / name).write_text("x", encoding="utf-8")
            controller = self._session(root)
            keys = iter(["", "j", "x", "q"])
            terminal = FakeTerminal()
            renderer = FakeRenderer()

            run_main_loop(
                controller,
                renderer,
                terminal,
                0,
                RuntimeLoopTiming(key_poll_timeout_ms=1),
                read=lambda _fd, _timeout: next(keys),
            )
            controller.teardown()

        self.assertEqual(terminal.events, ["enter", "exit"])
        self.assertEqual(terminal.writes, ["frame 1 cursor=0", "frame 2 cursor=1"])

    def test_keyboard_interrupt_is_treated_as_quit(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "files").mkdir()
            controller = self._session(root)
            terminal = FakeTerminal()

            def interrupt(_fd, _timeout):
                raise KeyboardInterrupt

            run_main_loop(controller, FakeRenderer(), terminal, 0, read=interrupt)
            controller.teardown()

        self.assertEqual(terminal.events, ["enter", "exit"])


if __name__ == "__main__":
    unittest.main()
