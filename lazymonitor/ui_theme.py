"""UI theme definitions and selection helpers.

Themes are ANSI palettes for panel chrome (borders, titles, cursor rows).
Detail colorization uses a separate Pygments style setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the frame renderer."""

    name: str
    reset: str
    border: str
    border_focused: str
    title: str
    title_focused: str
    cursor_row: str
    error_text: str
    editor_caret: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    border="\033[2m",
    border_focused="\033[1;36m",
    title="\033[1m",
    title_focused="\033[1;46;30m",
    cursor_row="\033[30;43m",
    error_text="\033[31m",
    editor_caret="\033[7m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    border="\033[2;38;5;31m",
    border_focused="\033[1;38;5;45m",
    title="\033[38;5;117m",
    title_focused="\033[1;48;5;31;38;5;231m",
    cursor_row="\033[48;5;24;38;5;231m",
    error_text="\033[38;5;203m",
    editor_caret="\033[7m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="\033[0m",
    border="",
    border_focused="\033[1m",
    title="",
    title_focused="\033[1;7m",
    cursor_row="\033[7m",
    error_text="\033[1m",
    editor_caret="\033[7m",
)

THEMES: dict[str, UITheme] = {
    theme.name: theme
    for theme in (DEFAULT_THEME, OCEAN_THEME)
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable theme names."""
    return tuple(sorted(THEMES))


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return the theme for ``name`` and color mode, falling back to default."""
    if no_color:
        return PLAIN_THEME
    if not name:
        return DEFAULT_THEME
    return THEMES.get(str(name).strip().lower(), DEFAULT_THEME)
