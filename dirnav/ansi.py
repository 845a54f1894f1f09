"""Display-width aware text shaping for terminal rows.

Rows are composed from plain text first and styled afterwards, so these
helpers measure and cut plain strings; ``strip_ansi`` recovers the plain text
of a composed row.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
ELLIPSIS = "…"

# C0 controls except tab/newline/carriage return, DEL, and C1 controls.
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
_LINE_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")


def _escape_control(match: re.Match[str]) -> str:
    return f"\\x{ord(match.group(0)):02x}"


def strip_ansi(text: str) -> str:
    """Remove SGR and cursor escape sequences from ``text``."""
    return ANSI_ESCAPE_RE.sub("", text)


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.).

    Newlines, carriage returns and tabs are kept so multi-line text can still
    be split into lines afterwards.
    """
    return _CONTROL_RE.sub(_escape_control, source)


def sanitize_line(text: str) -> str:
    """Escape every control byte so ``text`` occupies exactly one terminal row.

    Used for file names, link targets and paths, which may legally contain
    newlines or escape characters.
    """
    return _LINE_CONTROL_RE.sub(_escape_control, text)


def char_width(ch: str) -> int:
    """Return terminal cell width of one character (0, 1, or 2)."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Total terminal cells occupied by plain ``text``."""
    return sum(char_width(ch) for ch in text)


def clip_to_width(text: str, max_cols: int) -> str:
    """Cut plain ``text`` so it occupies at most ``max_cols`` cells."""
    if max_cols <= 0:
        return ""
    used = 0
    for idx, ch in enumerate(text):
        w = char_width(ch)
        if used + w > max_cols:
            return text[:idx]
        used += w
    return text


def pad_to_width(text: str, cols: int) -> str:
    """Clip then right-pad with spaces to exactly ``cols`` cells."""
    clipped = clip_to_width(text, cols)
    return clipped + " " * max(0, cols - display_width(clipped))


def truncate_with_ellipsis(text: str, max_cols: int) -> str:
    """Fit ``text`` into ``max_cols`` cells, ending in ``…`` when it was cut.

    Never wraps: a single-cell budget yields just the ellipsis.
    """
    if max_cols <= 0:
        return ""
    if display_width(text) <= max_cols:
        return text
    return clip_to_width(text, max_cols - 1) + ELLIPSIS


def clip_ansi(text: str, max_cols: int) -> str:
    """Cut a styled line to ``max_cols`` visible cells, keeping escape codes.

    A reset is appended when anything was cut so styles cannot bleed into the
    following cells.
    """
    if max_cols <= 0:
        return ""
    out: list[str] = []
    used = 0
    pos = 0
    while pos < len(text):
        match = ANSI_ESCAPE_RE.match(text, pos)
        if match is not None:
            out.append(match.group(0))
            pos = match.end()
            continue
        w = char_width(text[pos])
        if used + w > max_cols:
            out.append("\033[0m")
            break
        out.append(text[pos])
        used += w
        pos += 1
    return "".join(out)
