"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the listing chrome, entry colours and overlays.
Preview syntax colouring is a separate Pygments style setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    reverse: str
    header: str
    settings: str
    footer: str
    status_error: str
    entry_dir: str
    entry_symlink: str
    entry_executable: str
    entry_file: str
    entry_invalid: str
    count: str
    help_heading: str
    help_key: str
    help_dim: str
    modal_title: str
    modal_border: str
    detail_label: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    header="\033[1;38;5;81m",
    settings="\033[38;5;250m",
    footer="\033[2;38;5;250m",
    status_error="\033[1;38;5;203m",
    entry_dir="\033[1;34m",
    entry_symlink="\033[36m",
    entry_executable="\033[32m",
    entry_file="\033[38;5;252m",
    entry_invalid="\033[38;5;203m",
    count="\033[38;5;109m",
    help_heading="\033[1;38;5;81m",
    help_key="\033[38;5;229m",
    help_dim="\033[2;38;5;250m",
    modal_title="\033[1;38;5;45m",
    modal_border="\033[38;5;45m",
    detail_label="\033[38;5;109m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    header="\033[1;38;5;45m",
    settings="\033[38;5;153m",
    footer="\033[2;38;5;110m",
    status_error="\033[1;38;5;209m",
    entry_dir="\033[1;38;5;45m",
    entry_symlink="\033[38;5;117m",
    entry_executable="\033[38;5;79m",
    entry_file="\033[38;5;252m",
    entry_invalid="\033[38;5;209m",
    count="\033[38;5;73m",
    help_heading="\033[1;38;5;45m",
    help_key="\033[38;5;159m",
    help_dim="\033[2;38;5;110m",
    modal_title="\033[1;38;5;39m",
    modal_border="\033[38;5;31m",
    detail_label="\033[38;5;73m",
)

MONO_THEME = UITheme(
    name="mono",
    reset="\033[0m",
    reverse="\033[7m",
    header="\033[1m",
    settings="",
    footer="\033[2m",
    status_error="\033[1m",
    entry_dir="\033[1m",
    entry_symlink="\033[4m",
    entry_executable="",
    entry_file="",
    entry_invalid="\033[2m",
    count="",
    help_heading="\033[1m",
    help_key="\033[4m",
    help_dim="\033[2m",
    modal_title="\033[1m",
    modal_border="",
    detail_label="\033[2m",
)

THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
    MONO_THEME.name: MONO_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    return tuple(THEMES)


def resolve_theme(name: str | None) -> UITheme:
    """Return named theme, falling back to default for unknown names."""
    if not name:
        return DEFAULT_THEME
    return THEMES.get(name.strip().lower(), DEFAULT_THEME)
