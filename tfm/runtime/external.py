"""External collaborators: default opener, directory jump lookup, and shell.

Opener and shell helpers return an error message string instead of raising,
for UI-friendly handling. The jump lookup raises ``ExternalToolUnavailable``
so callers can tell a missing tool apart from an empty answer.
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from ..errors import ExternalToolUnavailable

logger = logging.getLogger(__name__)

DEFAULT_JUMP_COMMAND: tuple[str, ...] = ("zoxide", "query")
LOOKUP_TIMEOUT_SECONDS = 5.0


def default_open_command(path: Path, platform: str | None = None) -> list[str]:
    """Return the platform command that opens ``path`` with its default handler."""
    platform = sys.platform if platform is None else platform
    if platform == "darwin":
        return ["open", str(path)]
    if platform.startswith("win"):
        return ["cmd", "/c", "start", "", str(path)]
    return ["xdg-open", str(path)]


def open_with_default_app(path: Path) -> str | None:
    """Spawn the default handler for ``path`` without waiting for it."""
    try:
        subprocess.Popen(
            default_open_command(path),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        logger.info("cannot open %s: %s", path, exc)
        return f"Failed to open: {exc}"
    return None


def lookup_directory(query: str, command: Sequence[str] = DEFAULT_JUMP_COMMAND) -> str:
    """Ask the jump lookup tool for ``query`` and return its first output line."""
    argv = [*command, query]
    try:
        completed = subprocess.run(
            argv,
            check=True,
            capture_output=True,
            text=True,
            timeout=LOOKUP_TIMEOUT_SECONDS,
        )
    except FileNotFoundError as exc:
        raise ExternalToolUnavailable(f"{command[0]} is not installed") from exc
    except subprocess.CalledProcessError as exc:
        raise ExternalToolUnavailable(f"{command[0]} exited with status {exc.returncode}") from exc
    except (subprocess.TimeoutExpired, OSError) as exc:
        raise ExternalToolUnavailable(f"{command[0]} failed: {exc}") from exc
    lines = completed.stdout.splitlines()
    return lines[0].strip() if lines else ""


def default_shell(platform: str | None = None) -> str:
    platform = sys.platform if platform is None else platform
    shell = os.environ.get("SHELL", "").strip()
    if shell:
        return shell
    if platform.startswith("win"):
        return "cmd"
    return "/bin/bash"


def run_interactive_shell(
    path: Path,
    disable_tui_mode: Callable[[], None],
    enable_tui_mode: Callable[[], None],
) -> str | None:
    """Run the user's shell in ``path`` in the foreground until it exits."""
    shell = default_shell()
    disable_tui_mode()
    try:
        subprocess.run([shell], cwd=str(path), check=False)
    except OSError as exc:
        logger.info("cannot launch shell %s: %s", shell, exc)
        return f"Failed to launch shell: {exc}"
    finally:
        enable_tui_mode()
    return None


__all__ = [
    "DEFAULT_JUMP_COMMAND",
    "default_open_command",
    "open_with_default_app",
    "lookup_directory",
    "default_shell",
    "run_interactive_shell",
]
