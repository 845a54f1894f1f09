"""Tests for directory scanning and filtering.

Uses real temporary directories so ``lstat`` and symlink handling run
against the actual filesystem.
"""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirnav.flags import SessionFlags
from dirnav.listing.scan import include_entry, load_listing, scan_directory
from dirnav.listing.sorting import SORT_SIZE


class ScanDirectoryTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _populate(self) -> None:
        (self.root / ".hidden").write_text("h", encoding="utf-8")
        (self.root / "b.txt").write_text("bb", encoding="utf-8")
        (self.root / "a.txt").write_text("a", encoding="utf-8")
        (self.root / "sub").mkdir()

    def test_hidden_entries_are_skipped_by_default(self) -> None:
        (self.root / ".hidden").write_text("h", encoding="utf-8")
        (self.root / "b.txt").write_text("b", encoding="utf-8")
        (self.root / "a.txt").write_text("a", encoding="utf-8")

        result = load_listing(self.root, SessionFlags())

        self.assertIsNone(result.error)
        self.assertEqual(result.entries.names(), ["a.txt", "b.txt"])

    def test_show_hidden_includes_dotfiles_but_never_dot_entries(self) -> None:
        self._populate()

        result = load_listing(self.root, SessionFlags(show_hidden=True))

        self.assertEqual(result.entries.names(), [".hidden", "a.txt", "b.txt", "sub"])

    def test_dirs_only_and_files_only_filters(self) -> None:
        self._populate()

        dirs = load_listing(self.root, SessionFlags(dirs_only=True))
        files = load_listing(self.root, SessionFlags(files_only=True))

        self.assertEqual(dirs.entries.names(), ["sub"])
        self.assertEqual(files.entries.names(), ["a.txt", "b.txt"])

    def test_same_flags_yield_same_entries(self) -> None:
        self._populate()
        flags = SessionFlags(show_hidden=True, files_only=True)

        first = scan_directory(self.root, flags)
        second = scan_directory(self.root, flags)

        self.assertEqual(sorted(first.entries.names()), sorted(second.entries.names()))

    def test_entries_carry_lstat_metadata(self) -> None:
        (self.root / "data.bin").write_bytes(b"x" * 100)
        (self.root / "tiny").write_bytes(b"x" * 50)

        result = load_listing(self.root, SessionFlags(sort_mode=SORT_SIZE))

        self.assertEqual(result.entries.names(), ["data.bin", "tiny"])
        self.assertEqual(result.entries[0].metadata.size, 100)
        self.assertEqual(result.entries[0].path, self.root / "data.bin")

    def test_symlink_target_is_recorded_and_link_is_not_a_directory(self) -> None:
        (self.root / "real").mkdir()
        os.symlink("real", self.root / "alias")

        result = load_listing(self.root, SessionFlags())
        by_name = {entry.name: entry for entry in result.entries}

        self.assertEqual(by_name["alias"].link_target, "real")
        self.assertTrue(by_name["alias"].metadata.is_symlink)
        self.assertFalse(by_name["alias"].is_dir)

        dirs = load_listing(self.root, SessionFlags(dirs_only=True))
        self.assertEqual(dirs.entries.names(), ["real"])

    def test_missing_directory_reports_error_with_empty_store(self) -> None:
        missing = self.root / "gone"

        result = load_listing(missing, SessionFlags())

        self.assertEqual(len(result.entries), 0)
        self.assertIsInstance(result.error, FileNotFoundError)
        self.assertTrue(result.error_message.startswith(f"{missing}: "))

    def test_unreadable_directory_reports_error_without_raising(self) -> None:
        denied = PermissionError(13, "Permission denied")
        with mock.patch("dirnav.listing.scan.os.scandir", side_effect=denied):
            result = scan_directory(self.root, SessionFlags())

        self.assertEqual(len(result.entries), 0)
        self.assertEqual(result.error_message, f"{self.root}: Permission denied")

    def test_failed_lstat_keeps_entry_with_placeholder_metadata(self) -> None:
        (self.root / "flaky").write_text("x", encoding="utf-8")

        with mock.patch("dirnav.listing.scan.EntryMetadata.from_stat", side_effect=OSError("stale")):
            result = scan_directory(self.root, SessionFlags())
            filtered = scan_directory(self.root, SessionFlags(files_only=True))

        self.assertEqual(result.entries.names(), ["flaky"])
        self.assertIsNone(result.entries[0].metadata)
        self.assertEqual(len(filtered.entries), 0)


class IncludeEntryTests(unittest.TestCase):
    def test_dot_and_dotdot_are_always_excluded(self) -> None:
        flags = SessionFlags(show_hidden=True)
        self.assertFalse(include_entry(".", None, flags))
        self.assertFalse(include_entry("..", None, flags))
        self.assertTrue(include_entry(".profile", None, flags))
