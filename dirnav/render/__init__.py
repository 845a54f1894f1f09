"""Rendering engine for the directory listing view.

Defines render context data and builds fully composed ANSI frames.
Nothing here writes to the terminal or touches session state; the loop
stores the adjusted scroll offset and writes the frame.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..ansi import clip_to_width, display_width, pad_to_width, sanitize_line, truncate_with_ellipsis
from ..flags import SessionFlags
from ..formatting import format_mtime, format_size, group_name, mode_string, owner_name
from ..listing.types import Entry, EntryStore
from ..ui_theme import DEFAULT_THEME, UITheme
from .detail import build_detail_panel
from .help import build_help_page

# Header, settings line and footer.
CHROME_ROWS = 3

INVALID_LONG_PREFIX = f"{'?' * 10} {'?':>2} {'?':<8} {'?':<8} {'?':>8} ????-??-?? ??:?? "
FOOTER_HINT = "j/k move  Enter open  b back  a hidden  l long  s sort  n new  D delete  ? help  q quit"


@dataclass(frozen=True)
class RenderContext:
    current_path: Path
    entries: EntryStore
    cursor: int
    scroll_offset: int
    flags: SessionFlags
    rows: int
    columns: int
    theme: UITheme = DEFAULT_THEME
    status_message: str = ""
    status_is_error: bool = False
    clear: bool = False


def visible_rows(terminal_rows: int) -> int:
    """Return how many listing rows fit between the chrome rows."""
    return max(1, terminal_rows - CHROME_ROWS)


def adjust_scroll(cursor: int, scroll_offset: int, rows: int) -> int:
    """Return a scroll offset whose window ``[offset, offset + rows)`` holds the cursor."""
    rows = max(1, rows)
    if cursor < scroll_offset:
        return cursor
    if cursor >= scroll_offset + rows:
        return cursor - rows + 1
    return scroll_offset


def long_row_prefix(entry: Entry, human_readable: bool) -> str:
    """Columns before the name: mode, links, owner, group, size, mtime."""
    meta = entry.metadata
    if meta is None:
        return INVALID_LONG_PREFIX
    size = format_size(meta.size, human_readable)
    return (
        f"{mode_string(meta.mode)} {meta.nlink:>2} "
        f"{owner_name(meta.uid):<8} {group_name(meta.gid):<8} "
        f"{size:>8} {format_mtime(meta.mtime)} "
    )


def link_suffix(entry: Entry) -> str:
    """Return the ` -> target` tail shown for readable symlinks."""
    meta = entry.metadata
    if meta is None or not meta.is_symlink or entry.link_target is None:
        return ""
    return f" -> {sanitize_line(entry.link_target)}"


def format_entry_line(entry: Entry, flags: SessionFlags) -> str:
    """Plain (unstyled) listing text for ``entry`` in the active format."""
    name = sanitize_line(entry.name)
    if not flags.long_format:
        return name
    return long_row_prefix(entry, flags.human_readable_sizes) + name + link_suffix(entry)


def entry_style(entry: Entry, theme: UITheme) -> str:
    """Pick the name colour from the entry type."""
    meta = entry.metadata
    if meta is None:
        return theme.entry_invalid
    if meta.is_dir:
        return theme.entry_dir
    if meta.is_symlink:
        return theme.entry_symlink
    if meta.is_regular and meta.mode & 0o111:
        return theme.entry_executable
    return theme.entry_file


def build_entry_row(entry: Entry, flags: SessionFlags, width: int, theme: UITheme, selected: bool) -> str:
    """Compose one listing row clipped to ``width`` cells.

    The selected row is padded to the full width and drawn in inverse video;
    other rows colour only the name segment.
    """
    if selected:
        return f"{theme.reverse}{pad_to_width(format_entry_line(entry, flags), width)}{theme.reset}"

    prefix = long_row_prefix(entry, flags.human_readable_sizes) if flags.long_format else ""
    suffix = link_suffix(entry) if flags.long_format else ""
    prefix = clip_to_width(prefix, width)
    remaining = width - display_width(prefix)
    name = clip_to_width(sanitize_line(entry.name), remaining)
    remaining -= display_width(name)
    suffix = clip_to_width(suffix, remaining)
    return f"{prefix}{entry_style(entry, theme)}{name}{theme.reset}{suffix}"


def build_header(current_path: Path, width: int, theme: UITheme) -> str:
    """Title row with the current path, ellipsized to ``width``."""
    text = truncate_with_ellipsis(sanitize_line(f"dirnav: {current_path}"), width)
    return f"{theme.header}{text}{theme.reset}"


def build_settings_line(context: RenderContext, width: int) -> str:
    """Active flags on the left, ``cursor/total`` right-aligned."""
    flags = context.flags
    settings = (
        f"Sort:{flags.sort_label}  "
        f"Hidden:{'ON' if flags.show_hidden else 'OFF'}  "
        f"Format:{'Long' if flags.long_format else 'Short'}  "
        f"Human:{'ON' if flags.human_readable_sizes else 'OFF'}  "
        f"Filter:{flags.filter_label}"
    )
    total = len(context.entries)
    position = f"{min(context.cursor + 1, total)}/{total}"
    gap = width - display_width(settings) - display_width(position)
    if gap < 1:
        return f"{context.theme.settings}{clip_to_width(settings, width)}{context.theme.reset}"
    return (
        f"{context.theme.settings}{settings}{context.theme.reset}"
        f"{' ' * gap}{context.theme.count}{position}{context.theme.reset}"
    )


def build_footer(context: RenderContext, width: int) -> str:
    """Status message when one is set, otherwise the key hint."""
    theme = context.theme
    if context.status_message:
        style = theme.status_error if context.status_is_error else theme.settings
        return f"{style}{truncate_with_ellipsis(sanitize_line(context.status_message), width)}{theme.reset}"
    return f"{theme.footer}{clip_to_width(FOOTER_HINT, width)}{theme.reset}"


def build_frame_lines(context: RenderContext) -> list[str]:
    """Return every screen row of the listing view, top to bottom.

    The listing area always has ``visible_rows`` lines; rows past the last
    entry are blank so the frame height never changes between redraws.
    """
    # Leave the last column free so terminals never auto-wrap a full row.
    width = max(1, context.columns - 1)
    rows = visible_rows(context.rows)
    lines = [build_header(context.current_path, width, context.theme), build_settings_line(context, width)]

    start = max(0, context.scroll_offset)
    for idx in range(start, start + rows):
        if idx < len(context.entries):
            lines.append(
                build_entry_row(
                    context.entries[idx],
                    context.flags,
                    width,
                    context.theme,
                    selected=idx == context.cursor,
                )
            )
        else:
            lines.append("")

    lines.append(build_footer(context, width))
    return lines


def build_frame(context: RenderContext) -> str:
    """Compose the full frame as one string of positioned row writes."""
    out: list[str] = []
    if context.clear:
        out.append("\033[2J")
    out.append("\033[H")
    for row, line in enumerate(build_frame_lines(context)):
        out.append(f"\033[{row + 1};1H{line}\033[0m\033[K")
    return "".join(out)


__all__ = [
    "CHROME_ROWS",
    "RenderContext",
    "adjust_scroll",
    "build_detail_panel",
    "build_entry_row",
    "build_frame",
    "build_frame_lines",
    "build_help_page",
    "format_entry_line",
    "visible_rows",
]
