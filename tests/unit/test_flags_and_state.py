"""Tests for listing flags and session state helpers."""

from __future__ import annotations

import unittest
from pathlib import Path

from dirnav.flags import SessionFlags
from dirnav.listing.sorting import SORT_NAME, SORT_SIZE, SORT_TIME
from dirnav.listing.types import Entry, EntryStore
from dirnav.runtime.state import SessionState


class SessionFlagsTests(unittest.TestCase):
    def test_type_filters_are_mutually_exclusive(self) -> None:
        flags = SessionFlags()

        flags.toggle_files_only()
        flags.toggle_dirs_only()
        self.assertTrue(flags.dirs_only)
        self.assertFalse(flags.files_only)

        flags.toggle_files_only()
        self.assertTrue(flags.files_only)
        self.assertFalse(flags.dirs_only)

        flags.toggle_files_only()
        self.assertFalse(flags.files_only)
        self.assertEqual(flags.filter_label, "All")

    def test_sort_cycle_and_labels(self) -> None:
        flags = SessionFlags()
        seen = [flags.sort_mode]
        for _ in range(3):
            flags.cycle_sort_mode()
            seen.append(flags.sort_mode)

        self.assertEqual(seen, [SORT_NAME, SORT_SIZE, SORT_TIME, SORT_NAME])
        self.assertEqual(SessionFlags(sort_mode=SORT_TIME).sort_label, "Time")


class SessionStateTests(unittest.TestCase):
    def _state(self, count: int) -> SessionState:
        entries = EntryStore([Entry(Path(f"/d/{idx}")) for idx in range(count)])
        return SessionState(current_path=Path("/d"), flags=SessionFlags(), entries=entries)

    def test_clamp_cursor_into_range(self) -> None:
        state = self._state(3)
        state.cursor = 10
        state.scroll_offset = 20
        state.clamp_cursor()

        self.assertEqual(state.cursor, 2)
        self.assertLessEqual(state.scroll_offset, state.cursor)

    def test_empty_listing_has_cursor_zero_and_no_selection(self) -> None:
        state = self._state(0)
        state.cursor = 4
        state.clamp_cursor()

        self.assertEqual(state.cursor, 0)
        self.assertIsNone(state.selected_entry())

    def test_status_set_and_clear(self) -> None:
        state = self._state(1)
        state.set_status("boom", error=True)
        self.assertTrue(state.status_is_error)

        state.clear_status()
        self.assertEqual((state.status_message, state.status_is_error), ("", False))
