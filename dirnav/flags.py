"""View and filter flags shared by the scanner, renderer and session loop."""

from __future__ import annotations

from dataclasses import dataclass

from .listing.sorting import SORT_LABELS, SORT_NAME, next_sort_mode


@dataclass
class SessionFlags:
    """Listing preferences.

    ``dirs_only`` and ``files_only`` are mutually exclusive; use the toggle
    methods rather than assigning both.
    """

    show_hidden: bool = False
    long_format: bool = False
    human_readable_sizes: bool = False
    dirs_only: bool = False
    files_only: bool = False
    sort_mode: str = SORT_NAME

    def toggle_dirs_only(self) -> None:
        self.dirs_only = not self.dirs_only
        if self.dirs_only:
            self.files_only = False

    def toggle_files_only(self) -> None:
        self.files_only = not self.files_only
        if self.files_only:
            self.dirs_only = False

    def cycle_sort_mode(self) -> None:
        self.sort_mode = next_sort_mode(self.sort_mode)

    @property
    def filter_label(self) -> str:
        if self.dirs_only:
            return "Dirs"
        if self.files_only:
            return "Files"
        return "All"

    @property
    def sort_label(self) -> str:
        return SORT_LABELS.get(self.sort_mode, self.sort_mode)
