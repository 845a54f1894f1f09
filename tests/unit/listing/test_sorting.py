"""Tests for listing sort policies.

Checks each ordering, name tie-breaks, and placement of entries whose
metadata could not be read.
"""

from __future__ import annotations

import stat
import unittest
from pathlib import Path

from dirnav.listing.sorting import (
    SORT_NAME,
    SORT_SIZE,
    SORT_TIME,
    is_sort_mode,
    next_sort_mode,
    sort_entries,
    sort_key_for,
)
from dirnav.listing.types import Entry, EntryMetadata, EntryStore


def _entry(name: str, size: int = 0, mtime_ns: int = 0, valid: bool = True) -> Entry:
    if not valid:
        return Entry(Path("/d") / name)
    meta = EntryMetadata(
        mode=stat.S_IFREG | 0o644,
        nlink=1,
        uid=0,
        gid=0,
        size=size,
        mtime=mtime_ns / 1e9,
        mtime_ns=mtime_ns,
    )
    return Entry(Path("/d") / name, meta)


class SortPolicyTests(unittest.TestCase):
    def test_name_sort_is_ascending(self) -> None:
        store = EntryStore([_entry("c"), _entry("a"), _entry("B"), _entry("b")])

        sort_entries(store, SORT_NAME)

        names = store.names()
        self.assertEqual(names, sorted(names))
        self.assertEqual(names, ["B", "a", "b", "c"])

    def test_size_sort_puts_bigger_files_first(self) -> None:
        store = EntryStore([_entry("small", size=50), _entry("big", size=100)])

        sort_entries(store, SORT_SIZE)

        self.assertEqual(store.names(), ["big", "small"])

    def test_size_ties_break_by_name(self) -> None:
        store = EntryStore([_entry("z", size=10), _entry("m", size=10), _entry("a", size=5)])

        sort_entries(store, SORT_SIZE)

        self.assertEqual(store.names(), ["m", "z", "a"])

    def test_time_sort_is_newest_first(self) -> None:
        store = EntryStore(
            [
                _entry("old", mtime_ns=1_000),
                _entry("new", mtime_ns=3_000),
                _entry("mid", mtime_ns=2_000),
            ]
        )

        sort_entries(store, SORT_TIME)

        self.assertEqual(store.names(), ["new", "mid", "old"])

    def test_invalid_metadata_sorts_after_valid_entries(self) -> None:
        store = EntryStore(
            [
                _entry("ghost-b", valid=False),
                _entry("empty", size=0),
                _entry("ghost-a", valid=False),
                _entry("full", size=9),
            ]
        )

        sort_entries(store, SORT_SIZE)
        self.assertEqual(store.names(), ["full", "empty", "ghost-a", "ghost-b"])

        sort_entries(store, SORT_TIME)
        self.assertEqual(store.names()[-2:], ["ghost-a", "ghost-b"])

    def test_unknown_mode_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            sort_key_for("colour")
        self.assertFalse(is_sort_mode("colour"))
        self.assertFalse(is_sort_mode(None))
        self.assertTrue(is_sort_mode(SORT_TIME))

    def test_next_sort_mode_cycles(self) -> None:
        self.assertEqual(next_sort_mode(SORT_NAME), SORT_SIZE)
        self.assertEqual(next_sort_mode(SORT_SIZE), SORT_TIME)
        self.assertEqual(next_sort_mode(SORT_TIME), SORT_NAME)
        self.assertEqual(next_sort_mode("bogus"), SORT_NAME)
