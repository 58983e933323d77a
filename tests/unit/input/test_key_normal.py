"""Tests for normal-mode key dispatch."""

from __future__ import annotations

import unittest

from tfm.input.chords import ChordRecognizer
from tfm.input.key_normal import NormalKeyContext, NormalKeyHandler, handle_normal_key


class FakeClock:
    def __init__(self) -> None:
        self.now = 50.0

    def __call__(self) -> float:
        return self.now


def _make_context(clock: FakeClock, calls: list[str], results: dict[str, bool] | None = None):
    results = results or {}
    dirty: list[bool] = []

    def action(name: str):
        def run(*args) -> bool:
            calls.append(name if not args else f"{name}{args}")
            return results.get(name, True)

        return run

    context = NormalKeyContext(
        chords=ChordRecognizer(clock=clock),
        mark_dirty=lambda: dirty.append(True),
        move_cursor=action("move"),
        descend=action("descend"),
        ascend=action("ascend"),
        jump_first=action("jump_first"),
        jump_last=action("jump_last"),
        cut=action("cut"),
        copy=action("copy"),
        paste=action("paste"),
        delete=action("delete"),
        undo=action("undo"),
        begin_search=action("begin_search"),
        begin_rename=action("begin_rename"),
        begin_jump=action("begin_jump"),
        open_shell=action("open_shell"),
        toggle_hidden=action("toggle_hidden"),
        toggle_which_key=action("toggle_which_key"),
    )
    return context, dirty


class NormalKeyTests(unittest.TestCase):
    def test_quit_keys_return_true(self) -> None:
        calls: list[str] = []
        context, _ = _make_context(FakeClock(), calls)
        self.assertTrue(handle_normal_key("q", context))
        self.assertTrue(handle_normal_key("CTRL_C", context))
        self.assertEqual(calls, [])

    def test_movement_keys_map_to_cursor_moves(self) -> None:
        calls: list[str] = []
        context, dirty = _make_context(FakeClock(), calls)
        for key in ("j", "DOWN", "k", "UP"):
            self.assertFalse(handle_normal_key(key, context))
        self.assertEqual(calls, ["move(1,)", "move(1,)", "move(-1,)", "move(-1,)"])
        self.assertEqual(len(dirty), 4)

    def test_single_command_keys(self) -> None:
        calls: list[str] = []
        context, _ = _make_context(FakeClock(), calls)
        for key in ("l", "ENTER", "RIGHT", "h", "LEFT", "G", "END", "HOME", "u", "a", "/", "z", "S", ".", "?"):
            handle_normal_key(key, context)
        self.assertEqual(
            calls,
            [
                "descend",
                "descend",
                "descend",
                "ascend",
                "ascend",
                "jump_last",
                "jump_last",
                "jump_first",
                "undo",
                "begin_rename",
                "begin_search",
                "begin_jump",
                "open_shell",
                "toggle_hidden",
                "toggle_which_key",
            ],
        )

    def test_unchanged_action_does_not_mark_dirty(self) -> None:
        calls: list[str] = []
        context, dirty = _make_context(FakeClock(), calls, results={"move": False})
        handle_normal_key("j", context)
        self.assertEqual(calls, ["move(1,)"])
        self.assertEqual(dirty, [])

    def test_chord_keys_fire_once_per_pair(self) -> None:
        clock = FakeClock()
        calls: list[str] = []
        context, _ = _make_context(clock, calls)
        for key, action in (("d", "cut"), ("y", "copy"), ("p", "paste"), ("g", "jump_first")):
            calls.clear()
            handle_normal_key(key, context)
            self.assertEqual(calls, [])
            clock.now += 0.1
            handle_normal_key(key, context)
            self.assertEqual(calls, [action])
            clock.now += 0.1
            handle_normal_key(key, context)
            self.assertEqual(calls, [action])
            context.chords.reset()

    def test_chord_across_window_does_nothing(self) -> None:
        clock = FakeClock()
        calls: list[str] = []
        context, _ = _make_context(clock, calls)
        handle_normal_key("d", context)
        clock.now += 0.6
        handle_normal_key("d", context)
        self.assertEqual(calls, [])

    def test_delete_chord_via_double_shift_d_and_cross_chord(self) -> None:
        clock = FakeClock()
        calls: list[str] = []
        context, _ = _make_context(clock, calls)
        handle_normal_key("D", context)
        clock.now += 0.1
        handle_normal_key("D", context)
        self.assertEqual(calls, ["delete"])

        calls.clear()
        clock.now += 1.0
        handle_normal_key("d", context)
        clock.now += 0.1
        handle_normal_key("D", context)
        self.assertEqual(calls, ["delete"])

    def test_other_key_between_chord_presses_breaks_chord(self) -> None:
        clock = FakeClock()
        calls: list[str] = []
        context, _ = _make_context(clock, calls, results={"move": False})
        handle_normal_key("d", context)
        handle_normal_key("j", context)
        handle_normal_key("d", context)
        self.assertEqual(calls, ["move(1,)"])

    def test_mixed_chord_keys_do_not_fire(self) -> None:
        clock = FakeClock()
        calls: list[str] = []
        context, _ = _make_context(clock, calls)
        handle_normal_key("y", context)
        handle_normal_key("p", context)
        self.assertEqual(calls, [])

    def test_unknown_key_is_ignored(self) -> None:
        calls: list[str] = []
        context, dirty = _make_context(FakeClock(), calls)
        self.assertFalse(handle_normal_key("x", context))
        self.assertFalse(handle_normal_key("TAB", context))
        self.assertEqual(calls, [])
        self.assertEqual(dirty, [])

    def test_handler_wraps_context(self) -> None:
        calls: list[str] = []
        context, _ = _make_context(FakeClock(), calls)
        handler = NormalKeyHandler(context)
        self.assertTrue(handler.handle("q"))
        self.assertFalse(handler.handle("u"))
        self.assertEqual(calls, ["undo"])


if __name__ == "__main__":
    unittest.main()
