"""Main interactive event loop for the terminal UI.

Renders when state is dirty, reads one key at a time, and hands it to the
controller. One key is fully handled before the next one is read.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..input import read_key
from ..render import ScreenRenderer
from .controller import BrowserController
from .terminal import TerminalController

KEY_POLL_TIMEOUT_MS = 120


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    key_poll_timeout_ms: int = KEY_POLL_TIMEOUT_MS


def run_main_loop(
    controller: BrowserController,
    renderer: ScreenRenderer,
    terminal: TerminalController,
    stdin_fd: int,
    timing: RuntimeLoopTiming = RuntimeLoopTiming(),
    read: Callable[[int, int | None], str] = read_key,
) -> None:
    """Run the interactive loop until a quit action occurs."""
    state = controller.state
    last_size: tuple[int, int] | None = None

    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            size = (term.columns, term.lines)
            if size != last_size:
                last_size = size
                state.dirty = True

            if state.dirty:
                terminal.write(renderer.render_frame(controller.view(), term.columns, term.lines))
                state.dirty = False

            try:
                key = read(stdin_fd, timing.key_poll_timeout_ms)
            except KeyboardInterrupt:
                key = "CTRL_C"
            if key == "":
                continue
            if controller.handle_key(key):
                break


__all__ = ["RuntimeLoopTiming", "run_main_loop"]
