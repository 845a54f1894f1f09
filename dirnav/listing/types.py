"""Domain types for one directory snapshot: entries and their container."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

ENTRY_STORE_BATCH = 64


@dataclass(frozen=True)
class EntryMetadata:
    """Cached ``lstat`` fields needed for filtering, sorting and long rows."""

    mode: int
    nlink: int
    uid: int
    gid: int
    size: int
    mtime: float
    mtime_ns: int

    @classmethod
    def from_stat(cls, st: os.stat_result) -> EntryMetadata:
        return cls(
            mode=st.st_mode,
            nlink=st.st_nlink,
            uid=st.st_uid,
            gid=st.st_gid,
            size=int(st.st_size),
            mtime=float(st.st_mtime),
            mtime_ns=int(st.st_mtime_ns),
        )

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.mode)

    @property
    def is_regular(self) -> bool:
        return stat.S_ISREG(self.mode)

    @property
    def is_symlink(self) -> bool:
        return stat.S_ISLNK(self.mode)


@dataclass(frozen=True)
class Entry:
    """One directory child.

    ``path`` is the only stored string; ``name`` is derived from it so the two
    can never disagree. ``metadata`` is ``None`` when lstat failed.
    """

    path: Path
    metadata: EntryMetadata | None = None
    link_target: str | None = None

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def metadata_valid(self) -> bool:
        return self.metadata is not None

    @property
    def is_dir(self) -> bool:
        return self.metadata is not None and self.metadata.is_dir


class EntryStore:
    """Ordered entries of one directory snapshot.

    Capacity is tracked in batches of ``ENTRY_STORE_BATCH`` and doubles when
    the live count reaches it, so ``len(store) <= store.capacity`` always.
    """

    def __init__(self, entries: list[Entry] | None = None) -> None:
        self._entries: list[Entry] = []
        self._capacity = 0
        for entry in entries or ():
            self.append(entry)

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, entry: Entry) -> None:
        if len(self._entries) == self._capacity:
            self._capacity = self._capacity * 2 if self._capacity else ENTRY_STORE_BATCH
        self._entries.append(entry)

    def reorder(self, ordered: list[Entry]) -> None:
        """Replace contents with a permutation of the current entries."""
        if len(ordered) != len(self._entries):
            raise ValueError("reorder must keep every entry")
        self._entries[:] = ordered

    def clear(self) -> None:
        self._entries.clear()
        self._capacity = 0

    def names(self) -> list[str]:
        return [entry.name for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> Entry:
        return self._entries[index]

    def __repr__(self) -> str:
        return f"EntryStore({self.names()!r})"
