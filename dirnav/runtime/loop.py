"""Interactive session state machine.

One iteration: consume a pending resize, rescan when dirty, render, block for
a key, dispatch it. Only dispatch mutates ``SessionState``; anything that
invalidates the listing sets ``needs_refresh`` and lets the next iteration
rescan.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from ..ansi import clip_to_width, sanitize_line, truncate_with_ellipsis
from ..input import KEY_EOF, KeyComboBinding, KeyComboRegistry
from ..listing.scan import ScanResult, load_listing
from ..listing.types import Entry
from ..preview import DEFAULT_STYLE, highlight_lines, read_head_lines
from ..render import RenderContext, adjust_scroll, build_detail_panel, build_frame, build_help_page, visible_rows
from ..ui_theme import DEFAULT_THEME, UITheme
from . import actions
from .navigation import back_target
from .state import (
    PHASE_AWAITING_INPUT,
    PHASE_DISPATCHING,
    PHASE_RENDERING,
    PHASE_SCANNING,
    PHASE_TERMINATING,
    SessionState,
)
from .terminal import TerminalController

logger = logging.getLogger(__name__)

NEW_ENTRY_PROMPT = "New file (end with / for a directory): "
PROMPT_CANCEL_KEYS = frozenset({"ESC", "CTRL_C", KEY_EOF})


class SessionController:
    """Binds keys to session actions and drives the render/input cycle."""

    def __init__(
        self,
        state: SessionState,
        terminal: TerminalController,
        read_key: Callable[[], str],
        theme: UITheme = DEFAULT_THEME,
        preview_style: str = DEFAULT_STYLE,
        load_listing: Callable[..., ScanResult] = load_listing,
        on_show_hidden_changed: Callable[[bool], None] | None = None,
    ) -> None:
        self.state = state
        self.terminal = terminal
        self.read_key = read_key
        self.theme = theme
        self.preview_style = preview_style
        self._load_listing = load_listing
        self._on_show_hidden_changed = on_show_hidden_changed
        self._clear_next_frame = True
        self.registry = KeyComboRegistry().register_bindings(
            KeyComboBinding(("DOWN", "j"), self.move_down, "cursor down"),
            KeyComboBinding(("UP", "k"), self.move_up, "cursor up"),
            KeyComboBinding(("ENTER",), self.open_selected, "open"),
            KeyComboBinding(("b",), self.go_back, "back"),
            KeyComboBinding(("a",), self.toggle_hidden, "hidden files"),
            KeyComboBinding(("l",), self.toggle_long_format, "long format"),
            KeyComboBinding(("H",), self.toggle_human_sizes, "human sizes"),
            KeyComboBinding(("s",), self.cycle_sort, "sort order"),
            KeyComboBinding(("d",), self.toggle_dirs_only, "directories only"),
            KeyComboBinding(("f",), self.toggle_files_only, "files only"),
            KeyComboBinding(("r",), self.refresh, "rescan"),
            KeyComboBinding(("n",), self.create_entry, "new entry"),
            KeyComboBinding(("D",), self.delete_selected, "delete"),
            KeyComboBinding(("?",), self.show_help, "help"),
            KeyComboBinding(("q",), self.quit, "quit"),
        )

    # -- loop -------------------------------------------------------------

    @property
    def terminated(self) -> bool:
        return self.state.phase == PHASE_TERMINATING

    def run(self) -> None:
        """Iterate until the quit action moves the session to terminating."""
        while self.step():
            pass

    def step(self) -> bool:
        """Run one scan/render/input/dispatch cycle; ``False`` once terminating."""
        state = self.state
        if self.terminal.consume_resize():
            state.resize_pending = True
        if state.needs_refresh:
            state.phase = PHASE_SCANNING
            self.rescan()
        state.phase = PHASE_RENDERING
        self.render()
        state.phase = PHASE_AWAITING_INPUT
        key = self.read_key()
        state.phase = PHASE_DISPATCHING
        self.dispatch(key)
        return not self.terminated

    def rescan(self) -> None:
        state = self.state
        result = self._load_listing(state.current_path, state.flags)
        state.entries.clear()
        state.entries = result.entries
        state.cursor = 0
        state.scroll_offset = 0
        state.needs_refresh = False
        if result.error_message is not None:
            state.set_status(result.error_message, error=True)

    def render(self) -> None:
        state = self.state
        rows, columns = self.terminal.size()
        state.clamp_cursor()
        state.scroll_offset = adjust_scroll(state.cursor, state.scroll_offset, visible_rows(rows))
        context = RenderContext(
            current_path=state.current_path,
            entries=state.entries,
            cursor=state.cursor,
            scroll_offset=state.scroll_offset,
            flags=state.flags,
            rows=rows,
            columns=columns,
            theme=self.theme,
            status_message=state.status_message,
            status_is_error=state.status_is_error,
            clear=self._clear_next_frame or state.resize_pending,
        )
        self.terminal.write(build_frame(context))
        self._clear_next_frame = False
        state.resize_pending = False

    def dispatch(self, key: str) -> None:
        """Apply one key. Unbound keys are ignored; end of input quits."""
        self.state.clear_status()
        if key == KEY_EOF:
            self.quit()
            return
        self.registry.dispatch(key)

    def release(self) -> None:
        """Drop listing and history once the session is over."""
        self.state.entries.clear()
        self.state.history.clear()

    # -- cursor -----------------------------------------------------------

    def move_down(self) -> None:
        state = self.state
        if state.cursor < len(state.entries) - 1:
            state.cursor += 1

    def move_up(self) -> None:
        if self.state.cursor > 0:
            self.state.cursor -= 1

    # -- navigation -------------------------------------------------------

    def change_directory(self, target: Path) -> None:
        self.state.current_path = target
        self.state.cursor = 0
        self.state.scroll_offset = 0
        self.state.needs_refresh = True

    def open_selected(self) -> None:
        state = self.state
        entry = state.selected_entry()
        if entry is None:
            return
        if entry.is_dir:
            state.history.push(state.current_path)
            self.change_directory(entry.path)
            return
        self.show_detail(entry)

    def go_back(self) -> None:
        state = self.state
        target = back_target(state.history, state.current_path)
        if target is None:
            state.set_status("Already at the filesystem root")
            return
        self.change_directory(target)

    # -- flags ------------------------------------------------------------

    def toggle_hidden(self) -> None:
        flags = self.state.flags
        flags.show_hidden = not flags.show_hidden
        self.state.needs_refresh = True
        if self._on_show_hidden_changed is not None:
            self._on_show_hidden_changed(flags.show_hidden)

    def toggle_long_format(self) -> None:
        self.state.flags.long_format = not self.state.flags.long_format

    def toggle_human_sizes(self) -> None:
        flags = self.state.flags
        flags.human_readable_sizes = not flags.human_readable_sizes

    def cycle_sort(self) -> None:
        self.state.flags.cycle_sort_mode()
        self.state.needs_refresh = True

    def toggle_dirs_only(self) -> None:
        self.state.flags.toggle_dirs_only()
        self.state.needs_refresh = True

    def toggle_files_only(self) -> None:
        self.state.flags.toggle_files_only()
        self.state.needs_refresh = True

    def refresh(self) -> None:
        self.state.needs_refresh = True

    def quit(self) -> None:
        self.state.phase = PHASE_TERMINATING

    # -- overlays ---------------------------------------------------------

    def _show_blocking(self, frame: str) -> None:
        """Draw an overlay and swallow the next key."""
        self.terminal.write(frame)
        self.read_key()
        self._clear_next_frame = True

    def show_help(self) -> None:
        rows, columns = self.terminal.size()
        self._show_blocking(build_help_page(columns, rows, self.theme))

    def _load_preview(self, entry: Entry, width: int) -> tuple[list[str] | None, str]:
        meta = entry.metadata
        if meta is None or not meta.is_regular:
            return None, ""
        try:
            lines = read_head_lines(entry.path)
        except OSError as exc:
            return None, f"cannot read: {exc.strerror or exc}"
        if lines is None:
            return None, "binary file"
        if not lines:
            return None, "empty file"
        clipped = [clip_to_width(line, width) for line in lines]
        return highlight_lines(clipped, entry.path, self.preview_style), ""

    def show_detail(self, entry: Entry) -> None:
        rows, columns = self.terminal.size()
        preview, note = self._load_preview(entry, max(1, columns - 8))
        frame = build_detail_panel(
            entry,
            columns,
            rows,
            self.theme,
            human_readable=self.state.flags.human_readable_sizes,
            preview=preview,
            preview_note=note,
        )
        self._show_blocking(frame)

    # -- prompts and file actions ------------------------------------------

    def _draw_prompt(self, text: str) -> None:
        rows, columns = self.terminal.size()
        line = truncate_with_ellipsis(sanitize_line(text), max(1, columns - 1))
        self.terminal.write(f"\033[{rows};1H{self.theme.reverse}{line}{self.theme.reset}\033[K")

    def prompt(self, label: str) -> str | None:
        """Read one line of text on the footer row; ``None`` when cancelled."""
        buffer = ""
        while True:
            self._draw_prompt(f"{label}{buffer}_")
            key = self.read_key()
            if key in PROMPT_CANCEL_KEYS:
                return None
            if key == "ENTER":
                return buffer
            if key == "BACKSPACE":
                buffer = buffer[:-1]
            elif key == "CTRL_U":
                buffer = ""
            elif len(key) == 1 and key.isprintable():
                buffer += key

    def confirm(self, question: str) -> bool:
        self._draw_prompt(f"{question} [y/N] ")
        return self.read_key() in {"y", "Y"}

    def create_entry(self) -> None:
        state = self.state
        raw_name = self.prompt(NEW_ENTRY_PROMPT)
        if not raw_name:
            return
        try:
            created = actions.create_entry(state.current_path, raw_name)
        except (OSError, ValueError) as exc:
            logger.info("Create failed in %s: %s", state.current_path, exc)
            state.set_status(f"Create failed: {exc}", error=True)
            return
        state.needs_refresh = True
        kind = "directory" if created.is_dir() else "file"
        state.set_status(f"Created {kind} {created.name}")

    def delete_selected(self) -> None:
        state = self.state
        entry = state.selected_entry()
        if entry is None:
            return
        if not self.confirm(f"Delete {entry.name}?"):
            state.set_status("Delete cancelled")
            return
        try:
            actions.delete_entry(entry)
        except OSError as exc:
            logger.info("Delete failed for %s: %s", entry.path, exc)
            state.set_status(f"Delete failed: {exc.strerror or exc}", error=True)
            state.needs_refresh = True
            return
        state.needs_refresh = True
        state.set_status(f"Deleted {entry.name}")
