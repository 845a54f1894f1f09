"""Directory scanning: one level of children, filtered and ``lstat``-annotated."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from .sorting import sort_entries
from .types import Entry, EntryMetadata, EntryStore

if TYPE_CHECKING:
    from ..flags import SessionFlags

logger = logging.getLogger(__name__)

_SKIPPED_NAMES = frozenset({".", ".."})


@dataclass
class ScanResult:
    """Entries read from ``directory`` plus the error that stopped the scan."""

    directory: Path
    entries: EntryStore
    error: OSError | None = None

    @property
    def error_message(self) -> str | None:
        if self.error is None:
            return None
        reason = self.error.strerror or str(self.error)
        return f"{self.directory}: {reason}"


def include_entry(name: str, metadata: EntryMetadata | None, flags: SessionFlags) -> bool:
    """Return whether a candidate passes the active hidden/type filter.

    Entries with failed metadata pass unless a type filter needs the type.
    """
    if name in _SKIPPED_NAMES:
        return False
    if not flags.show_hidden and name.startswith("."):
        return False
    if flags.dirs_only and (metadata is None or not metadata.is_dir):
        return False
    if flags.files_only and (metadata is None or not metadata.is_regular):
        return False
    return True


def _lstat_child(child: os.DirEntry) -> tuple[EntryMetadata | None, str | None]:
    try:
        metadata = EntryMetadata.from_stat(child.stat(follow_symlinks=False))
    except OSError as exc:
        logger.debug("Cannot stat %s: %s", child.path, exc)
        return None, None

    link_target: str | None = None
    if metadata.is_symlink:
        try:
            link_target = os.readlink(child.path)
        except OSError as exc:
            logger.debug("Cannot read link %s: %s", child.path, exc)
    return metadata, link_target


def scan_directory(directory: Path, flags: SessionFlags) -> ScanResult:
    """Read immediate children of ``directory`` that pass ``flags``.

    An unopenable directory yields an empty store and the ``OSError``; the
    caller decides how to report it.
    """
    store = EntryStore()
    try:
        with os.scandir(directory) as children:
            for child in children:
                name = child.name
                if name in _SKIPPED_NAMES:
                    continue
                if not flags.show_hidden and name.startswith("."):
                    continue
                metadata, link_target = _lstat_child(child)
                if not include_entry(name, metadata, flags):
                    continue
                store.append(
                    Entry(
                        path=directory / name,
                        metadata=metadata,
                        link_target=link_target,
                    )
                )
    except OSError as exc:
        logger.warning("Cannot scan %s: %s", directory, exc)
        return ScanResult(directory=directory, entries=EntryStore(), error=exc)

    return ScanResult(directory=directory, entries=store)


def load_listing(directory: Path, flags: SessionFlags) -> ScanResult:
    """Scan ``directory`` and sort the result by ``flags.sort_mode``."""
    result = scan_directory(directory, flags)
    sort_entries(result.entries, flags.sort_mode)
    return result
