"""Sort policies for directory listings.

Each mode is a key function; size and time put entries without metadata
after every valid entry and break ties on the display name.
"""

from __future__ import annotations

from collections.abc import Callable

from .types import Entry, EntryStore

SORT_NAME = "name"
SORT_SIZE = "size"
SORT_TIME = "time"
SORT_MODES: tuple[str, ...] = (SORT_NAME, SORT_SIZE, SORT_TIME)

SORT_LABELS = {
    SORT_NAME: "Name",
    SORT_SIZE: "Size",
    SORT_TIME: "Time",
}


def _name_key(entry: Entry) -> tuple:
    return (entry.name,)


def _size_key(entry: Entry) -> tuple:
    if entry.metadata is None:
        return (1, 0, entry.name)
    return (0, -entry.metadata.size, entry.name)


def _time_key(entry: Entry) -> tuple:
    if entry.metadata is None:
        return (1, 0, entry.name)
    return (0, -entry.metadata.mtime_ns, entry.name)


_SORT_KEYS: dict[str, Callable[[Entry], tuple]] = {
    SORT_NAME: _name_key,
    SORT_SIZE: _size_key,
    SORT_TIME: _time_key,
}


def sort_key_for(mode: str) -> Callable[[Entry], tuple]:
    """Return the key function for ``mode``; unknown modes raise ``ValueError``."""
    try:
        return _SORT_KEYS[mode]
    except KeyError:
        raise ValueError(f"unknown sort mode: {mode!r}") from None


def sort_entries(store: EntryStore, mode: str) -> None:
    """Reorder every entry in ``store`` according to ``mode``."""
    store.reorder(sorted(store, key=sort_key_for(mode)))


def next_sort_mode(mode: str) -> str:
    """Cycle name → size → time → name."""
    try:
        idx = SORT_MODES.index(mode)
    except ValueError:
        return SORT_NAME
    return SORT_MODES[(idx + 1) % len(SORT_MODES)]


def is_sort_mode(value: object) -> bool:
    """True when ``value`` names a known sort mode."""
    return isinstance(value, str) and value in _SORT_KEYS
