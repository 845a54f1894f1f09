"""Tests for raw key decoding.

Feeds bytes through a pipe so ``select`` and ``os.read`` behave as they do
on a real terminal descriptor.
"""

from __future__ import annotations

import os
import unittest

from dirnav.input import KEY_EOF, _PENDING_BYTES, read_key


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        _PENDING_BYTES.clear()
        self.read_fd, self.write_fd = os.pipe()

    def tearDown(self) -> None:
        _PENDING_BYTES.clear()
        os.close(self.read_fd)
        if self.write_fd is not None:
            os.close(self.write_fd)

    def _feed(self, data: bytes) -> None:
        os.write(self.write_fd, data)

    def _close_writer(self) -> None:
        os.close(self.write_fd)
        self.write_fd = None

    def test_arrow_sequences_decode_to_directions(self) -> None:
        self._feed(b"\x1b[A\x1b[B\x1b[C\x1b[D")

        keys = [read_key(self.read_fd) for _ in range(4)]

        self.assertEqual(keys, ["UP", "DOWN", "RIGHT", "LEFT"])

    def test_plain_and_control_bytes(self) -> None:
        self._feed(b"j\r\n\x7f\x03\x15?")

        keys = [read_key(self.read_fd) for _ in range(7)]

        self.assertEqual(keys, ["j", "ENTER", "ENTER", "BACKSPACE", "CTRL_C", "CTRL_U", "?"])

    def test_lone_escape_decodes_as_esc(self) -> None:
        self._feed(b"\x1b")

        self.assertEqual(read_key(self.read_fd), "ESC")

    def test_escape_followed_by_key_keeps_the_key(self) -> None:
        self._feed(b"\x1bq")

        self.assertEqual(read_key(self.read_fd), "ESC")
        self.assertEqual(read_key(self.read_fd), "q")

    def test_unsupported_csi_sequence_is_drained(self) -> None:
        self._feed(b"\x1b[5~k")

        self.assertEqual(read_key(self.read_fd), "ESC")
        self.assertEqual(read_key(self.read_fd), "k")

    def test_multibyte_character_is_reassembled(self) -> None:
        self._feed("é".encode("utf-8"))

        self.assertEqual(read_key(self.read_fd), "é")

    def test_closed_input_reports_eof(self) -> None:
        self._close_writer()

        self.assertEqual(read_key(self.read_fd), KEY_EOF)
