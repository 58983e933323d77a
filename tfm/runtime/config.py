"""Persistent JSON config helpers.

Stores the hidden-file preference, chord timing, jump command and theme.
Malformed or missing config falls back to defaults instead of raising.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from ..input.chords import CHORD_WINDOW_SECONDS
from .external import DEFAULT_JUMP_COMMAND

logger = logging.getLogger(__name__)

APP_NAME = "tfm"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_CHORD_WINDOW_MS = int(CHORD_WINDOW_SECONDS * 1000)
MIN_CHORD_WINDOW_MS = 50
MAX_CHORD_WINDOW_MS = 5000
DEFAULT_PREVIEW_STYLE = "monokai"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON; write errors are logged only."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("cannot save config %s: %s", CONFIG_PATH, exc)


def load_show_hidden() -> bool:
    """Return persisted hidden-file visibility; non-booleans mean ``False``."""
    value = load_config().get("show_hidden")
    return bool(value) if isinstance(value, bool) else False


def save_show_hidden(show_hidden: bool) -> None:
    config = load_config()
    config["show_hidden"] = bool(show_hidden)
    save_config(config)


def load_chord_window_ms() -> int:
    """Return chord window in milliseconds, clamped to a sane range."""
    value = load_config().get("chord_window_ms")
    if isinstance(value, bool) or not isinstance(value, int):
        return DEFAULT_CHORD_WINDOW_MS
    return max(MIN_CHORD_WINDOW_MS, min(MAX_CHORD_WINDOW_MS, value))


def load_jump_command() -> tuple[str, ...]:
    """Return jump lookup argv prefix; the query is appended at call time."""
    value = load_config().get("jump_command")
    if not isinstance(value, list) or not value:
        return DEFAULT_JUMP_COMMAND
    if not all(isinstance(part, str) and part for part in value):
        return DEFAULT_JUMP_COMMAND
    return tuple(value)


def _load_stripped_string(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_theme_name() -> str | None:
    return _load_stripped_string("theme")


def load_preview_style() -> str:
    return _load_stripped_string("preview_style") or DEFAULT_PREVIEW_STYLE
