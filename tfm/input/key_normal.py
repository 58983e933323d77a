"""Normal-mode keyboard handling."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .chords import ChordRecognizer
from .key_registry import KeyComboBinding, KeyComboRegistry


@dataclass(frozen=True)
class NormalKeyContext:
    """Chord recognizer plus bound operations required for normal-mode keys.

    Every operation returns ``True`` when it changed visible state.
    """

    chords: ChordRecognizer
    mark_dirty: Callable[[], None]
    move_cursor: Callable[[int], bool]
    descend: Callable[[], bool]
    ascend: Callable[[], bool]
    jump_first: Callable[[], bool]
    jump_last: Callable[[], bool]
    cut: Callable[[], bool]
    copy: Callable[[], bool]
    paste: Callable[[], bool]
    delete: Callable[[], bool]
    undo: Callable[[], bool]
    begin_search: Callable[[], bool]
    begin_rename: Callable[[], bool]
    begin_jump: Callable[[], bool]
    open_shell: Callable[[], bool]
    toggle_hidden: Callable[[], bool]
    toggle_which_key: Callable[[], bool]


class NormalKeyHandler:
    """Reusable normal-mode handler with bound runtime dependencies."""

    def __init__(self, context: NormalKeyContext) -> None:
        self.context = context

    def handle(self, key: str) -> bool:
        """Handle one normal-mode key and return ``True`` when app should quit."""
        return handle_normal_key(key, self.context)


def handle_normal_key(key: str, context: NormalKeyContext) -> bool:
    """Handle one normal-mode key and return ``True`` when app should quit."""
    chords = context.chords

    def run(action: Callable[[], bool]) -> Callable[[], bool]:
        def invoke() -> bool:
            if action():
                context.mark_dirty()
            return False

        return invoke

    def chord(chord_key: str, action: Callable[[], bool]) -> Callable[[], bool]:
        """Fire ``action`` once when ``chord_key`` completes a pending chord."""

        def invoke() -> bool:
            if chords.feed(chord_key) and action():
                context.mark_dirty()
            return False

        return invoke

    def quit_action() -> bool:
        """Signal application shutdown."""
        return True

    chord_bindings = KeyComboRegistry().register_bindings(
        KeyComboBinding(("d",), chord("d", context.cut)),
        KeyComboBinding(("D",), chord("D", context.delete)),
        KeyComboBinding(("y",), chord("y", context.copy)),
        KeyComboBinding(("p",), chord("p", context.paste)),
        KeyComboBinding(("g",), chord("g", context.jump_first)),
    )
    handled = chord_bindings.dispatch(key)
    if handled is not None:
        return handled

    chords.reset()

    command_bindings = KeyComboRegistry().register_bindings(
        KeyComboBinding(("q", "CTRL_C"), quit_action),
        KeyComboBinding(("j", "DOWN"), run(lambda: context.move_cursor(1))),
        KeyComboBinding(("k", "UP"), run(lambda: context.move_cursor(-1))),
        KeyComboBinding(("l", "ENTER", "RIGHT"), run(context.descend)),
        KeyComboBinding(("h", "LEFT"), run(context.ascend)),
        KeyComboBinding(("G", "END"), run(context.jump_last)),
        KeyComboBinding(("HOME",), run(context.jump_first)),
        KeyComboBinding(("u",), run(context.undo)),
        KeyComboBinding(("a",), run(context.begin_rename)),
        KeyComboBinding(("/",), run(context.begin_search)),
        KeyComboBinding(("z",), run(context.begin_jump)),
        KeyComboBinding(("S",), run(context.open_shell)),
        KeyComboBinding((".",), run(context.toggle_hidden)),
        KeyComboBinding(("?",), run(context.toggle_which_key)),
    )
    handled = command_bindings.dispatch(key)
    if handled is not None:
        return handled
    return False
