"""Terminal control for the browsing session.

Owns raw-mode lifecycle, alternate-screen switching, cached geometry and
resize-signal intake. Nothing else in the package touches termios.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import signal
import termios
import time
import tty
from collections.abc import Callable, Iterator

SIZE_CACHE_SECONDS = 0.5
DEFAULT_SIZE = (80, 24)

ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?25l\x1b[2J\x1b[H"
LEAVE_TUI_SEQUENCE = b"\x1b[0m\x1b[?25h\x1b[?1049l"


class TerminalSetupError(RuntimeError):
    """Raised when stdin cannot be switched into raw mode."""


class TerminalGuard:
    """Holds the tty configuration captured on entry.

    ``restore`` is idempotent, so the guard can be released from a ``finally``
    block and from an emergency path without double-writing escape codes.
    """

    def __init__(self, controller: TerminalController, saved_tty_state: list) -> None:
        self._controller = controller
        self._saved_tty_state = saved_tty_state
        self._restored = False

    @property
    def restored(self) -> bool:
        return self._restored

    def restore(self) -> None:
        if self._restored:
            return
        self._restored = True
        self._controller.disable_tui_mode(self._saved_tty_state)


class TerminalController:
    """Manage terminal mode transitions, screen output and resize tracking."""

    def __init__(
        self,
        stdin_fd: int,
        stdout_fd: int,
        size_cache_seconds: float = SIZE_CACHE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self.size_cache_seconds = size_cache_seconds
        self._clock = clock
        self._cached_size: tuple[int, int] | None = None
        self._cached_at = 0.0
        # Written from the SIGWINCH handler; a plain attribute store only.
        self._resize_pending = False
        self._previous_winch_handler: object = None
        self._winch_installed = False

    def enable_tui_mode(self) -> TerminalGuard:
        """Capture tty state, enter raw mode and the alternate screen."""
        try:
            saved = termios.tcgetattr(self.stdin_fd)
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        except (termios.error, OSError) as exc:
            raise TerminalSetupError(f"cannot enter raw mode: {exc}") from exc
        try:
            self.write_bytes(ENTER_TUI_SEQUENCE)
        except OSError as exc:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, saved)
            raise TerminalSetupError(f"cannot enter alternate screen: {exc}") from exc
        return TerminalGuard(self, saved)

    def disable_tui_mode(self, saved_tty_state: list) -> None:
        """Show the cursor, return to the primary screen and restore the tty."""
        try:
            self.write_bytes(LEAVE_TUI_SEQUENCE)
        finally:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, saved_tty_state)

    @contextlib.contextmanager
    def raw_mode(self) -> Iterator[TerminalGuard]:
        """Bracket a session with raw mode and resize tracking.

        The terminal is restored and the previous ``SIGWINCH`` handler put back
        on every exit path.
        """
        guard = self.enable_tui_mode()
        try:
            self.install_resize_handler()
            yield guard
        finally:
            try:
                self.remove_resize_handler()
            finally:
                guard.restore()

    def _on_resize(self, _signum: int, _frame: object) -> None:
        self._resize_pending = True

    def install_resize_handler(self) -> None:
        if self._winch_installed:
            return
        self._previous_winch_handler = signal.signal(signal.SIGWINCH, self._on_resize)
        self._winch_installed = True

    def remove_resize_handler(self) -> None:
        if not self._winch_installed:
            return
        previous = self._previous_winch_handler
        signal.signal(signal.SIGWINCH, previous if previous is not None else signal.SIG_DFL)
        self._winch_installed = False
        self._previous_winch_handler = None

    @property
    def resize_pending(self) -> bool:
        return self._resize_pending

    def consume_resize(self) -> bool:
        """Return whether a resize arrived since the last call; resets the flag."""
        if not self._resize_pending:
            return False
        self._resize_pending = False
        self.invalidate_size()
        return True

    def invalidate_size(self) -> None:
        self._cached_size = None

    def size(self) -> tuple[int, int]:
        """Return ``(rows, columns)``, re-querying at most every cache interval."""
        now = self._clock()
        if self._cached_size is not None and now - self._cached_at < self.size_cache_seconds:
            return self._cached_size
        term = shutil.get_terminal_size(DEFAULT_SIZE)
        self._cached_size = (max(1, term.lines), max(1, term.columns))
        self._cached_at = now
        return self._cached_size

    def write_bytes(self, payload: bytes) -> None:
        while payload:
            written = os.write(self.stdout_fd, payload)
            payload = payload[written:]

    def write(self, text: str) -> None:
        self.write_bytes(text.encode("utf-8", errors="replace"))
