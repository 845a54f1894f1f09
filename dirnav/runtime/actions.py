"""Filesystem mutations triggered from the listing: create and delete.

Each operation runs to completion and raises ``OSError`` or ``ValueError``
on failure; the session turns those into status messages and rescans.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from ..listing.types import Entry

logger = logging.getLogger(__name__)


def parse_new_name(raw_name: str) -> tuple[str, bool]:
    """Split prompt input into ``(name, is_directory)``.

    A trailing ``/`` requests a directory. Names must be a single path
    component and may not be ``.`` or ``..``.
    """
    text = raw_name.strip()
    is_directory = text.endswith("/")
    name = text.rstrip("/")
    if not name:
        raise ValueError("name is empty")
    if "/" in name or "\0" in name:
        raise ValueError(f"name must not contain '/': {name!r}")
    if name in {".", ".."}:
        raise ValueError(f"reserved name: {name!r}")
    return name, is_directory


def create_entry(directory: Path, raw_name: str) -> Path:
    """Create an empty file or a directory inside ``directory``.

    Never overwrites: an existing name raises ``FileExistsError``.
    """
    name, is_directory = parse_new_name(raw_name)
    target = directory / name
    if is_directory:
        target.mkdir()
    else:
        with target.open("x", encoding="utf-8"):
            pass
    logger.info("Created %s %s", "directory" if is_directory else "file", target)
    return target


def delete_entry(entry: Entry) -> None:
    """Remove ``entry`` from disk; real directories are removed recursively.

    Symlinks are unlinked, never followed.
    """
    path = entry.path
    if entry.is_dir:
        shutil.rmtree(path)
    else:
        os.unlink(path)
    logger.info("Deleted %s", path)
