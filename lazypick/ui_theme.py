"""UI theme definitions and selection helpers.

Themes are semantic ANSI palettes for picker chrome. Render functions take a
theme argument explicitly, so tests can swap in ``PLAIN_THEME`` and assert on
uncolored text.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    title: str
    title_muted: str
    subtitle: str
    help: str
    border: str
    border_focused: str
    badge_background: str
    badge_query: str
    badge_mutation: str
    badge_subscription: str
    badge_endpoint: str
    toggle_on: str

    def paint(self, style: str, text: str) -> str:
        """Wrap ``text`` in ``style`` and a reset, or return it unchanged."""
        if not style or not text:
            return text
        return f"{style}{text}{self.reset}"


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    title="\033[1;38;5;75m",
    title_muted="\033[1;38;5;245m",
    subtitle="\033[38;5;141m",
    help="\033[38;5;245m",
    border="\033[38;5;245m",
    border_focused="\033[38;5;75m",
    badge_background="\033[48;5;236m",
    badge_query="\033[38;5;39m",
    badge_mutation="\033[38;5;214m",
    badge_subscription="\033[38;5;87m",
    badge_endpoint="\033[38;5;245m",
    toggle_on="\033[38;5;42m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    title="\033[1;38;5;45m",
    title_muted="\033[1;38;5;110m",
    subtitle="\033[38;5;117m",
    help="\033[2;38;5;110m",
    border="\033[2;38;5;31m",
    border_focused="\033[38;5;39m",
    badge_background="\033[48;5;24m",
    badge_query="\033[38;5;153m",
    badge_mutation="\033[38;5;215m",
    badge_subscription="\033[38;5;84m",
    badge_endpoint="\033[38;5;110m",
    toggle_on="\033[38;5;84m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    title="",
    title_muted="",
    subtitle="",
    help="",
    border="",
    border_focused="",
    badge_background="",
    badge_query="",
    badge_mutation="",
    badge_subscription="",
    badge_endpoint="",
    toggle_on="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
    PLAIN_THEME.name: PLAIN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable theme names."""
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
