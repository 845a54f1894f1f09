"""Mutable state of one interactive browsing session."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..flags import SessionFlags
from ..listing.types import Entry, EntryStore
from .navigation import NavigationHistory

PHASE_SCANNING = "scanning"
PHASE_RENDERING = "rendering"
PHASE_AWAITING_INPUT = "awaiting_input"
PHASE_DISPATCHING = "dispatching"
PHASE_TERMINATING = "terminating"


@dataclass
class SessionState:
    """Everything the event loop reads and mutates.

    ``entries`` is only authoritative for ``current_path``; changes that
    invalidate it set ``needs_refresh`` instead of editing it in place.
    """

    current_path: Path
    flags: SessionFlags
    entries: EntryStore = field(default_factory=EntryStore)
    history: NavigationHistory = field(default_factory=NavigationHistory)
    cursor: int = 0
    scroll_offset: int = 0
    needs_refresh: bool = True
    resize_pending: bool = False
    status_message: str = ""
    status_is_error: bool = False
    phase: str = PHASE_SCANNING

    def selected_entry(self) -> Entry | None:
        if 0 <= self.cursor < len(self.entries):
            return self.entries[self.cursor]
        return None

    def clamp_cursor(self) -> None:
        last = max(0, len(self.entries) - 1)
        self.cursor = max(0, min(self.cursor, last))
        self.scroll_offset = max(0, min(self.scroll_offset, self.cursor))

    def set_status(self, message: str, error: bool = False) -> None:
        self.status_message = message
        self.status_is_error = error

    def clear_status(self) -> None:
        self.status_message = ""
        self.status_is_error = False
