"""Session bootstrap: build state, controller and renderer, then run the loop.

The trash directory is purged once when the loop exits, whichever way it
exits short of the process being killed.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from ..input.chords import ChordRecognizer
from ..ops.engine import FileOperationEngine
from ..render import ScreenRenderer
from ..render.theme import resolve_theme
from . import config
from .controller import BrowserController
from .external import run_interactive_shell
from .loop import run_main_loop
from .navigation import Navigator
from .state import AppState
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def build_session(
    path: Path,
    *,
    show_hidden: bool = False,
    chord_window_seconds: float | None = None,
    jump_command: tuple[str, ...] | None = None,
) -> BrowserController:
    """Create a controller rooted at ``path`` with a freshly read snapshot."""
    state = AppState(current_path=path, show_hidden=show_hidden)
    navigator = Navigator(
        state,
        jump_command=jump_command if jump_command is not None else config.load_jump_command(),
    )
    engine = FileOperationEngine(state, navigator.reload)
    if chord_window_seconds is None:
        chord_window_seconds = config.load_chord_window_ms() / 1000.0
    chords = ChordRecognizer(window_seconds=chord_window_seconds)
    controller = BrowserController(
        state,
        navigator,
        engine,
        chords,
        on_toggle_hidden=config.save_show_hidden,
    )
    navigator.reload()
    return controller


def run_browser(
    path: Path,
    style: str | None = None,
    no_color: bool = False,
    theme_name: str | None = None,
    show_hidden: bool | None = None,
) -> None:
    """Run the interactive browser on ``path`` until the user quits."""
    if show_hidden is None:
        show_hidden = config.load_show_hidden()
    controller = build_session(path, show_hidden=show_hidden)
    renderer = ScreenRenderer(
        resolve_theme(theme_name or config.load_theme_name(), no_color=no_color),
        style=style or config.load_preview_style(),
        no_color=no_color,
    )

    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())

    def open_shell() -> bool:
        error = run_interactive_shell(
            controller.state.current_path,
            terminal.disable_tui_mode,
            terminal.enable_tui_mode,
        )
        controller.state.status_message = error or ""
        return error is None

    controller.set_shell_launcher(open_shell)
    logger.info("session started in %s (pid %d)", path, os.getpid())
    try:
        run_main_loop(controller, renderer, terminal, stdin_fd)
    finally:
        controller.teardown()
        logger.info("session ended")
