"""Non-interactive listing: print a directory (optionally recursively) and exit."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from .ansi import sanitize_line
from .flags import SessionFlags
from .listing.scan import load_listing
from .render import format_entry_line


def dump_directory(
    directory: Path,
    flags: SessionFlags,
    out: TextIO,
    recursive: bool = False,
    err: TextIO | None = None,
) -> int:
    """Write ``directory:`` followed by one line per entry, then a blank line.

    With ``recursive`` every listed subdirectory follows in the same format;
    symlinks are not descended. Returns the number of directories that could
    not be read; each is reported on ``err`` (stderr by default).
    """
    err = err if err is not None else sys.stderr
    failures = 0
    pending = [directory]
    while pending:
        current = pending.pop(0)
        result = load_listing(current, flags)
        out.write(f"{sanitize_line(str(current))}:\n")
        if result.error_message is not None:
            err.write(f"dirnav: {sanitize_line(result.error_message)}\n")
            failures += 1
        for entry in result.entries:
            out.write(format_entry_line(entry, flags) + "\n")
        out.write("\n")
        if recursive:
            subdirs = [entry.path for entry in result.entries if entry.is_dir]
            pending[0:0] = subdirs
    return failures
