"""File-head loading, sanitization, and syntax highlighting for detail panels."""

from __future__ import annotations

import logging
from pathlib import Path

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .ansi import sanitize_terminal_text

logger = logging.getLogger(__name__)

PREVIEW_MAX_BYTES = 8192
PREVIEW_MAX_LINES = 12
DEFAULT_STYLE = "monokai"

_FORMATTERS: dict[str, Terminal256Formatter] = {}


def decode_head(data: bytes) -> str:
    """Decode a file head as UTF-8 when possible, else latin-1."""
    for encoding in ("utf-8", "utf-8-sig"):
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    return data.decode("latin-1")


def read_head_lines(path: Path, max_lines: int = PREVIEW_MAX_LINES) -> list[str] | None:
    """Return the first ``max_lines`` text lines of ``path``.

    ``None`` means the head looks binary (contains a NUL byte). ``OSError``
    propagates to the caller.
    """
    with path.open("rb") as handle:
        data = handle.read(PREVIEW_MAX_BYTES)
    if b"\x00" in data:
        return None
    text = sanitize_terminal_text(decode_head(data).expandtabs(4))
    return text.splitlines()[:max_lines]


def _formatter_for_style(style: str) -> Terminal256Formatter:
    """Return a cached formatter, substituting the default for unknown styles."""
    formatter = _FORMATTERS.get(style)
    if formatter is not None:
        return formatter
    try:
        get_style_by_name(style)
        resolved = style
    except ClassNotFound:
        logger.debug("Unknown pygments style %r, using %s", style, DEFAULT_STYLE)
        resolved = DEFAULT_STYLE
    formatter = Terminal256Formatter(style=resolved)
    _FORMATTERS[style] = formatter
    return formatter


def highlight_lines(lines: list[str], path: Path, style: str = DEFAULT_STYLE) -> list[str]:
    """Colour ``lines`` with the lexer matching ``path``'s filename."""
    if not lines:
        return []
    source = "\n".join(lines) + "\n"
    try:
        lexer = get_lexer_for_filename(path.name, source, stripnl=False)
    except ClassNotFound:
        lexer = TextLexer(stripnl=False)
    rendered = highlight(source, lexer, _formatter_for_style(style))
    out = rendered.split("\n")
    if out and out[-1] == "":
        out.pop()
    return out[: len(lines)]
