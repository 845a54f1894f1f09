"""Tests for create/delete filesystem actions."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from dirnav.listing.types import Entry, EntryMetadata
from dirnav.runtime import actions


def _entry_for(path: Path) -> Entry:
    return Entry(path, EntryMetadata.from_stat(os.lstat(path)))


class ParseNewNameTests(unittest.TestCase):
    def test_trailing_slash_requests_directory(self) -> None:
        self.assertEqual(actions.parse_new_name("docs/"), ("docs", True))
        self.assertEqual(actions.parse_new_name("  notes.txt "), ("notes.txt", False))

    def test_invalid_names_are_rejected(self) -> None:
        for raw in ("", "   ", "/", "a/b", ".", "..", "../", "bad\0name"):
            with self.subTest(raw=raw):
                with self.assertRaises(ValueError):
                    actions.parse_new_name(raw)


class CreateDeleteTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_create_file_and_directory(self) -> None:
        created_file = actions.create_entry(self.root, "new.txt")
        created_dir = actions.create_entry(self.root, "pkg/")

        self.assertTrue(created_file.is_file())
        self.assertEqual(created_file.read_bytes(), b"")
        self.assertTrue(created_dir.is_dir())

    def test_create_never_overwrites(self) -> None:
        existing = self.root / "keep.txt"
        existing.write_text("data", encoding="utf-8")

        with self.assertRaises(FileExistsError):
            actions.create_entry(self.root, "keep.txt")
        self.assertEqual(existing.read_text(encoding="utf-8"), "data")

    def test_delete_removes_directory_tree(self) -> None:
        tree = self.root / "tree"
        (tree / "nested").mkdir(parents=True)
        (tree / "nested" / "leaf.txt").write_text("x", encoding="utf-8")

        actions.delete_entry(_entry_for(tree))

        self.assertFalse(tree.exists())

    def test_delete_symlink_keeps_target(self) -> None:
        target = self.root / "target"
        target.mkdir()
        (target / "inside.txt").write_text("x", encoding="utf-8")
        link = self.root / "link"
        os.symlink(target, link)

        actions.delete_entry(_entry_for(link))

        self.assertFalse(os.path.lexists(link))
        self.assertTrue((target / "inside.txt").exists())

    def test_delete_missing_file_raises(self) -> None:
        with self.assertRaises(FileNotFoundError):
            actions.delete_entry(Entry(self.root / "missing"))
