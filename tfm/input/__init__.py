"""Input-layer public API for key decoding, chords, modes and normal-mode commands.

Exports are split between low-level terminal decoding (`read_key`) and the
pure state machines used by the runtime controller.
"""

from .chords import CHORD_WINDOW_SECONDS, ChordRecognizer, ChordState, resolve_chord
from .key_normal import NormalKeyContext, NormalKeyHandler, handle_normal_key
from .key_registry import KeyComboBinding, KeyComboRegistry
from .modes import (
    Commit,
    Mode,
    ModeState,
    Transition,
    enter_mode,
    handle_mode_key,
)
from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key

__all__ = [
    "read_key",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "CHORD_WINDOW_SECONDS",
    "ChordRecognizer",
    "ChordState",
    "resolve_chord",
    "Mode",
    "ModeState",
    "Commit",
    "Transition",
    "enter_mode",
    "handle_mode_key",
    "NormalKeyContext",
    "NormalKeyHandler",
    "handle_normal_key",
]
