"""Keybinding reference: modal help overlay and plain-text usage epilog."""

from __future__ import annotations

from ..ui_theme import UITheme
from .modal import build_modal

HELP_SECTIONS: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "Navigation",
        (
            ("j / k, Down / Up", "move cursor"),
            ("Enter", "open directory, or show file details"),
            ("b", "back (history, then parent directory)"),
        ),
    ),
    (
        "View",
        (
            ("a", "toggle hidden files"),
            ("l", "toggle long format"),
            ("H", "toggle human-readable sizes"),
            ("s", "cycle sort order (name -> size -> time)"),
            ("d", "toggle directories only"),
            ("f", "toggle files only"),
            ("r", "rescan current directory"),
        ),
    ),
    (
        "Files",
        (
            ("n", "create file (end name with / for a directory)"),
            ("D", "delete selected entry (asks y/N)"),
        ),
    ),
    (
        "Other",
        (
            ("?", "this help"),
            ("q", "quit"),
        ),
    ),
)

_KEY_COLUMN = 18


def help_lines(theme: UITheme) -> list[str]:
    """Return styled help rows grouped by section."""
    lines: list[str] = []
    for heading, bindings in HELP_SECTIONS:
        if lines:
            lines.append("")
        lines.append(f"{theme.help_heading}{heading}{theme.reset}")
        for keys, description in bindings:
            lines.append(f"  {theme.help_key}{keys.ljust(_KEY_COLUMN)}{theme.reset}{description}")
    return lines


def plain_help_text() -> str:
    """Keybinding summary without styling, for ``--help`` output."""
    lines = ["interactive keys:"]
    for _heading, bindings in HELP_SECTIONS:
        for keys, description in bindings:
            lines.append(f"  {keys.ljust(_KEY_COLUMN)}{description}")
    return "\n".join(lines)


def build_help_page(width: int, height: int, theme: UITheme) -> str:
    """Key reference overlay as a full-screen modal frame."""
    return build_modal("dirnav help", help_lines(theme), width, height, theme)
