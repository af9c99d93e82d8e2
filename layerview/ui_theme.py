"""UI theme definitions and selection helpers.

Themes are UI-only ANSI palettes (header/list/help chrome). Highlighting
style for the node inspector remains a separate pygments setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    reverse: str
    border: str
    header_title: str
    header_meta: str
    item_text: str
    item_selected: str
    highlight_symbol: str
    truncated: str
    empty_hint: str
    help_heading: str
    help_key: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    border="\033[2m",
    header_title="\033[1;38;5;81m",
    header_meta="\033[38;5;250m",
    item_text="\033[32m",
    item_selected="\033[3;32m",
    highlight_symbol="\033[1;38;5;229m",
    truncated="\033[1;31m",
    empty_hint="\033[2;38;5;250m",
    help_heading="\033[1;38;5;81m",
    help_key="\033[38;5;229m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    border="\033[2;38;5;31m",
    header_title="\033[1;38;5;45m",
    header_meta="\033[38;5;153m",
    item_text="\033[38;5;117m",
    item_selected="\033[3;38;5;153m",
    highlight_symbol="\033[1;38;5;39m",
    truncated="\033[1;38;5;215m",
    empty_hint="\033[2;38;5;110m",
    help_heading="\033[1;38;5;45m",
    help_key="\033[38;5;153m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    border="",
    header_title="",
    header_meta="",
    item_text="",
    item_selected="",
    highlight_symbol="",
    truncated="",
    empty_hint="",
    help_heading="",
    help_key="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
