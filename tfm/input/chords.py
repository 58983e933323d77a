"""Two-key chord recognition (``dd``, ``yy``, ``pp``, ``gg``, ``dD``).

A chord resolves when the incoming key completes the pending key within the
timing window. Every key completes itself; extra partners can be configured,
e.g. ``D`` also completes a pending ``d`` so that ``dD`` deletes just like
``DD``. The clock is injected so the timing rule is testable without sleeps.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass

CHORD_WINDOW_SECONDS = 0.5

DEFAULT_CHORD_PARTNERS: Mapping[str, frozenset[str]] = {
    "D": frozenset({"d"}),
}


@dataclass(frozen=True)
class ChordState:
    pending_key: str | None = None
    timestamp: float | None = None


@dataclass(frozen=True)
class ChordResult:
    resolved: bool
    state: ChordState
    first_key: str | None = None


def resolve_chord(
    key: str,
    state: ChordState,
    now: float,
    window_seconds: float = CHORD_WINDOW_SECONDS,
    partners: Mapping[str, frozenset[str]] = DEFAULT_CHORD_PARTNERS,
) -> ChordResult:
    """Feed ``key`` into ``state`` and report whether a chord completed.

    On resolution the pending state is cleared, so a third identical key starts
    a new chord instead of firing again. Otherwise ``key`` becomes pending.
    """
    pending = state.pending_key
    if pending is not None and state.timestamp is not None:
        completes = pending == key or pending in partners.get(key, frozenset())
        if completes and now - state.timestamp < window_seconds:
            return ChordResult(resolved=True, state=ChordState(), first_key=pending)
    return ChordResult(resolved=False, state=ChordState(pending_key=key, timestamp=now))


class ChordRecognizer:
    """Stateful wrapper around :func:`resolve_chord` with an injected clock."""

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        window_seconds: float = CHORD_WINDOW_SECONDS,
        partners: Mapping[str, frozenset[str]] = DEFAULT_CHORD_PARTNERS,
    ) -> None:
        self._clock = clock
        self.window_seconds = window_seconds
        self._partners = partners
        self._state = ChordState()

    @property
    def state(self) -> ChordState:
        return self._state

    @property
    def pending_key(self) -> str | None:
        return self._state.pending_key

    def feed(self, key: str) -> bool:
        """Record ``key`` and return ``True`` when it completes a chord."""
        result = resolve_chord(key, self._state, self._clock(), self.window_seconds, self._partners)
        self._state = result.state
        return result.resolved

    def reset(self) -> None:
        self._state = ChordState()


__all__ = [
    "CHORD_WINDOW_SECONDS",
    "DEFAULT_CHORD_PARTNERS",
    "ChordState",
    "ChordResult",
    "resolve_chord",
    "ChordRecognizer",
]
