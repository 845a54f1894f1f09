"""Detail panel for a single entry: metadata table plus optional file preview."""

from __future__ import annotations

import stat

from ..ansi import sanitize_line
from ..formatting import format_mtime, format_size, group_name, mode_string, owner_name
from ..listing.types import Entry
from ..ui_theme import UITheme
from .modal import build_modal

_ENTRY_KINDS: tuple[tuple[int, str], ...] = (
    (stat.S_IFDIR, "directory"),
    (stat.S_IFREG, "regular file"),
    (stat.S_IFLNK, "symbolic link"),
    (stat.S_IFCHR, "character device"),
    (stat.S_IFBLK, "block device"),
    (stat.S_IFIFO, "named pipe"),
    (stat.S_IFSOCK, "socket"),
)


def entry_kind(mode: int) -> str:
    """Human name of the file type encoded in ``mode``."""
    file_type = stat.S_IFMT(mode)
    for candidate, label in _ENTRY_KINDS:
        if file_type == candidate:
            return label
    return "unknown"


def detail_fields(entry: Entry, human_readable: bool) -> list[tuple[str, str]]:
    """Return ``(label, value)`` rows describing ``entry``."""
    fields = [("Name", sanitize_line(entry.name)), ("Path", sanitize_line(str(entry.path)))]
    meta = entry.metadata
    if meta is None:
        fields.append(("Status", "metadata unavailable"))
        return fields
    fields.extend(
        [
            ("Type", entry_kind(meta.mode)),
            ("Mode", f"{mode_string(meta.mode)} ({stat.S_IMODE(meta.mode):04o})"),
            ("Size", format_size(meta.size, human_readable)),
            ("Links", str(meta.nlink)),
            ("Owner", owner_name(meta.uid)),
            ("Group", group_name(meta.gid)),
            ("Modified", format_mtime(meta.mtime)),
        ]
    )
    if meta.is_symlink:
        fields.append(("Target", sanitize_line(entry.link_target) if entry.link_target is not None else "(unreadable)"))
    return fields


def build_detail_panel(
    entry: Entry,
    width: int,
    height: int,
    theme: UITheme,
    human_readable: bool = False,
    preview: list[str] | None = None,
    preview_note: str = "",
) -> str:
    """Render the blocking detail overlay for ``entry``.

    ``preview`` holds already-highlighted head lines; ``preview_note`` replaces
    it with a one-line explanation (binary file, unreadable, ...).
    """
    body: list[str] = []
    for label, value in detail_fields(entry, human_readable):
        body.append(f"{theme.detail_label}{label:<9}{theme.reset}{value}")
    if preview or preview_note:
        body.append("")
        body.append(f"{theme.help_heading}Preview{theme.reset}")
        if preview_note:
            body.append(f"{theme.help_dim}{preview_note}{theme.reset}")
        else:
            body.extend(preview or ())
    return build_modal(entry.name, body, width, height, theme)
