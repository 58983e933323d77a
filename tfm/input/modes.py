"""Modal input state machine.

The browser is always in exactly one mode. ``normal`` forwards keys to the
command table; each prompt mode (``search``, ``rename``, ``jump``) owns a text
buffer and captures every key until it is confirmed or cancelled. Each mode
has one handler returning the next state plus an optional commit.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


class Mode(Enum):
    NORMAL = "normal"
    SEARCH = "search"
    RENAME = "rename"
    JUMP = "jump"


PROMPT_MODES: frozenset[Mode] = frozenset({Mode.SEARCH, Mode.RENAME, Mode.JUMP})

CONFIRM_KEYS = frozenset({"ENTER"})
CANCEL_KEYS = frozenset({"ESC", "CTRL_C"})
BACKSPACE_KEYS = frozenset({"BACKSPACE"})


@dataclass(frozen=True)
class ModeState:
    mode: Mode = Mode.NORMAL
    buffer: str = ""


@dataclass(frozen=True)
class Commit:
    """Confirmed prompt text that the owner of the mode should act on."""

    mode: Mode
    text: str


@dataclass(frozen=True)
class Transition:
    state: ModeState
    commit: Commit | None = None
    forward: bool = False


NORMAL_STATE = ModeState()


def enter_mode(mode: Mode, seed: str = "") -> ModeState:
    """Return a fresh state for ``mode``; only prompt modes keep ``seed``."""
    if mode is Mode.NORMAL:
        return NORMAL_STATE
    return ModeState(mode=mode, buffer=seed)


def is_text_key(key: str) -> bool:
    """Single printable characters are appended; named tokens are not."""
    return len(key) == 1 and key.isprintable()


def handle_normal_mode_key(state: ModeState, key: str) -> Transition:
    """Normal mode owns no buffer; every key goes to the command table."""
    return Transition(state=state, forward=True)


def handle_prompt_mode_key(state: ModeState, key: str) -> Transition:
    """Edit, confirm or cancel the active prompt buffer."""
    if key in CONFIRM_KEYS:
        return Transition(state=NORMAL_STATE, commit=Commit(mode=state.mode, text=state.buffer))
    if key in CANCEL_KEYS:
        return Transition(state=NORMAL_STATE)
    if key in BACKSPACE_KEYS:
        if not state.buffer:
            return Transition(state=state)
        return Transition(state=ModeState(mode=state.mode, buffer=state.buffer[:-1]))
    if is_text_key(key):
        return Transition(state=ModeState(mode=state.mode, buffer=state.buffer + key))
    return Transition(state=state)


_MODE_HANDLERS: dict[Mode, Callable[[ModeState, str], Transition]] = {
    Mode.NORMAL: handle_normal_mode_key,
    **{mode: handle_prompt_mode_key for mode in PROMPT_MODES},
}


def handle_mode_key(state: ModeState, key: str) -> Transition:
    """Route ``key`` to the handler owning ``state.mode``."""
    return _MODE_HANDLERS[state.mode](state, key)


__all__ = [
    "Mode",
    "PROMPT_MODES",
    "ModeState",
    "Commit",
    "Transition",
    "NORMAL_STATE",
    "enter_mode",
    "is_text_key",
    "handle_normal_mode_key",
    "handle_prompt_mode_key",
    "handle_mode_key",
]
