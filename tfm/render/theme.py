"""UI theme definitions and selection helpers.

Themes are UI-only ANSI palettes (listing/status/prompt chrome). Syntax
highlighting style for previews remains a separate setting. A theme is handed
to the renderer at construction; nothing reads a global palette.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    divider: str
    path_header: str
    selected: str
    directory: str
    empty_hint: str
    status_bar: str
    prompt_bar: str
    which_key_panel: str
    which_key_key: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    divider="\033[2m",
    path_header="\033[38;5;244m",
    selected="\033[1;38;5;205m",
    directory="\033[38;5;39m",
    empty_hint="\033[3;38;5;244m",
    status_bar="\033[38;5;234;48;5;252m",
    prompt_bar="\033[38;5;234;48;5;255m",
    which_key_panel="\033[38;5;234;48;5;252m",
    which_key_key="\033[1;38;5;205;48;5;252m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    divider="\033[2;38;5;31m",
    path_header="\033[38;5;110m",
    selected="\033[1;38;5;45m",
    directory="\033[1;38;5;39m",
    empty_hint="\033[3;38;5;73m",
    status_bar="\033[38;5;255;48;5;24m",
    prompt_bar="\033[38;5;255;48;5;31m",
    which_key_panel="\033[38;5;255;48;5;24m",
    which_key_key="\033[1;38;5;117;48;5;24m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    divider="",
    path_header="",
    selected="",
    directory="",
    empty_hint="",
    status_bar="",
    prompt_bar="",
    which_key_panel="",
    which_key_key="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    if not name:
        return DEFAULT_THEME
    return _THEMES.get(str(name).strip().lower(), DEFAULT_THEME)


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "resolve_theme",
]
