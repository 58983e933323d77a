"""Key routing from the mode state machine to navigation and file operations."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..input.chords import ChordRecognizer
from ..input.key_normal import NormalKeyContext, NormalKeyHandler
from ..input.modes import Commit, Mode, enter_mode, handle_mode_key
from ..ops.engine import FileOperationEngine
from .navigation import Navigator
from .state import AppState, ViewSnapshot

logger = logging.getLogger(__name__)


class BrowserController:
    """Own one browser session and apply each key event to it.

    ``open_shell`` is supplied by the runtime loop because it needs the
    terminal; ``on_toggle_hidden`` lets the app persist the preference.
    """

    def __init__(
        self,
        state: AppState,
        navigator: Navigator,
        engine: FileOperationEngine,
        chords: ChordRecognizer | None = None,
        *,
        open_shell: Callable[[], bool] | None = None,
        on_toggle_hidden: Callable[[bool], None] | None = None,
    ) -> None:
        self.state = state
        self.navigator = navigator
        self.engine = engine
        self.chords = chords if chords is not None else ChordRecognizer()
        self._open_shell = open_shell if open_shell is not None else (lambda: False)
        self._on_toggle_hidden = on_toggle_hidden
        self._normal_keys = NormalKeyHandler(
            NormalKeyContext(
                chords=self.chords,
                mark_dirty=self.mark_dirty,
                move_cursor=navigator.move,
                descend=navigator.descend,
                ascend=navigator.ascend,
                jump_first=navigator.jump_first,
                jump_last=navigator.jump_last,
                cut=engine.cut_mark,
                copy=engine.copy_mark,
                paste=engine.paste,
                delete=engine.delete,
                undo=engine.undo,
                begin_search=lambda: self.begin_mode(Mode.SEARCH),
                begin_rename=lambda: self.begin_mode(Mode.RENAME),
                begin_jump=lambda: self.begin_mode(Mode.JUMP),
                open_shell=self.open_shell,
                toggle_hidden=self.toggle_hidden,
                toggle_which_key=self.toggle_which_key,
            )
        )

    def mark_dirty(self) -> None:
        self.state.dirty = True

    def view(self) -> ViewSnapshot:
        return self.state.view(self.engine.clipboard.state(), len(self.engine.ledger))

    def begin_mode(self, mode: Mode) -> bool:
        """Enter a prompt mode; rename needs a valid entry and seeds its name."""
        seed = ""
        if mode is Mode.RENAME:
            entry = self.state.current_entry()
            if entry is None:
                return False
            seed = entry.name
        self.state.mode_state = enter_mode(mode, seed)
        return True

    def toggle_which_key(self) -> bool:
        self.state.show_which_key = not self.state.show_which_key
        return True

    def toggle_hidden(self) -> bool:
        changed = self.navigator.toggle_hidden()
        if changed and self._on_toggle_hidden is not None:
            self._on_toggle_hidden(self.state.show_hidden)
        return changed

    def open_shell(self) -> bool:
        """Hand the terminal to a shell, then reload for out-of-band changes."""
        self._open_shell()
        self.reload()
        return True

    def set_shell_launcher(self, open_shell: Callable[[], bool]) -> None:
        self._open_shell = open_shell

    def reload(self) -> None:
        """Handle the synthetic reload signal."""
        self.navigator.reload()

    def _apply_commit(self, commit: Commit) -> bool:
        if commit.mode is Mode.SEARCH:
            return self.navigator.search(commit.text)
        if commit.mode is Mode.RENAME:
            return self.engine.rename(commit.text)
        if commit.mode is Mode.JUMP:
            return self.navigator.jump_to_query(commit.text)
        return False

    def handle_key(self, key: str) -> bool:
        """Apply one key event; return ``True`` when the session should end."""
        if not key:
            return False
        if self.state.status_message:
            self.state.status_message = ""
            self.state.dirty = True
        previous = self.state.mode_state
        transition = handle_mode_key(previous, key)
        self.state.mode_state = transition.state
        if transition.state != previous:
            self.state.dirty = True
        if transition.commit is not None:
            logger.debug("commit %s %r", transition.commit.mode.value, transition.commit.text)
            self._apply_commit(transition.commit)
            self.state.dirty = True
            return False
        if not transition.forward:
            return False
        return self._normal_keys.handle(key)

    def teardown(self) -> None:
        self.engine.teardown()


__all__ = ["BrowserController"]
