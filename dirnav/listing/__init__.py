"""Directory listing model: entries, scanning, filtering, and sort policies."""

from __future__ import annotations

from .scan import ScanResult, include_entry, load_listing, scan_directory
from .sorting import (
    SORT_MODES,
    SORT_NAME,
    SORT_SIZE,
    SORT_TIME,
    is_sort_mode,
    next_sort_mode,
    sort_entries,
    sort_key_for,
)
from .types import ENTRY_STORE_BATCH, Entry, EntryMetadata, EntryStore

__all__ = [
    "ENTRY_STORE_BATCH",
    "Entry",
    "EntryMetadata",
    "EntryStore",
    "ScanResult",
    "include_entry",
    "load_listing",
    "scan_directory",
    "SORT_MODES",
    "SORT_NAME",
    "SORT_SIZE",
    "SORT_TIME",
    "is_sort_mode",
    "next_sort_mode",
    "sort_entries",
    "sort_key_for",
]
