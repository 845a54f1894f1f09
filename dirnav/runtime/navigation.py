"""Navigation primitives: visited-directory history and parent fallback.

This module has no UI concerns.
"""

from __future__ import annotations

from pathlib import Path


class NavigationHistory:
    """LIFO stack of previously visited directories.

    Pushing the path already on top is a no-op, so repeated entries of the
    same directory do not need several "back" presses to unwind.
    """

    def __init__(self) -> None:
        self._stack: list[Path] = []

    def push(self, path: Path) -> None:
        if self._stack and self._stack[-1] == path:
            return
        self._stack.append(path)

    def pop(self) -> Path | None:
        """Remove and return the most recent path, or ``None`` when empty."""
        if not self._stack:
            return None
        return self._stack.pop()

    def peek(self) -> Path | None:
        return self._stack[-1] if self._stack else None

    def clear(self) -> None:
        self._stack.clear()

    def as_list(self) -> list[Path]:
        return list(self._stack)

    def __len__(self) -> int:
        return len(self._stack)


def parent_fallback(current: Path) -> Path | None:
    """Return the filesystem parent of ``current``, or ``None`` at the root."""
    parent = current.parent
    if parent == current:
        return None
    return parent


def back_target(history: NavigationHistory, current: Path) -> Path | None:
    """Resolve where "back" goes: history first, then the parent directory."""
    previous = history.pop()
    if previous is not None:
        return previous
    return parent_fallback(current)
