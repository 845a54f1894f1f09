"""Session bootstrap: resolve the start directory, own the terminal, run the loop."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable
from dataclasses import replace
from pathlib import Path

from ..config import save_show_hidden
from ..flags import SessionFlags
from ..input import read_key
from ..preview import DEFAULT_STYLE
from ..ui_theme import DEFAULT_THEME, UITheme
from .loop import SessionController
from .state import SessionState
from .terminal import TerminalController, TerminalSetupError

logger = logging.getLogger(__name__)

FAREWELL_MESSAGE = "Thanks for using dirnav!"


class StartupError(Exception):
    """The session cannot start; reported before the terminal is touched."""


def resolve_start_path(raw_path: str | Path) -> Path:
    """Canonicalize the starting directory or raise ``StartupError``."""
    try:
        resolved = Path(raw_path).expanduser().resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        reason = getattr(exc, "strerror", None) or str(exc)
        raise StartupError(f"cannot resolve {raw_path}: {reason}") from exc
    if not resolved.is_dir():
        raise StartupError(f"not a directory: {resolved}")
    return resolved


def run_session(
    start_path: str | Path,
    flags: SessionFlags,
    theme: UITheme = DEFAULT_THEME,
    preview_style: str = DEFAULT_STYLE,
    stdin_fd: int | None = None,
    stdout_fd: int | None = None,
    terminal_factory: Callable[[int, int], TerminalController] = TerminalController,
    key_reader: Callable[[int], str] = read_key,
) -> None:
    """Run one interactive session until the user quits.

    Raises ``StartupError`` or ``TerminalSetupError`` before any screen output
    when the session cannot begin. The terminal is restored on every exit path;
    the farewell line is printed only after a normal quit.
    """
    current_path = resolve_start_path(start_path)
    stdin_fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
    stdout_fd = sys.stdout.fileno() if stdout_fd is None else stdout_fd
    if not os.isatty(stdin_fd):
        raise TerminalSetupError("stdin is not a terminal (use -b for batch output)")

    state = SessionState(current_path=current_path, flags=replace(flags))
    terminal = terminal_factory(stdin_fd, stdout_fd)
    controller = SessionController(
        state,
        terminal,
        lambda: key_reader(stdin_fd),
        theme=theme,
        preview_style=preview_style,
        on_show_hidden_changed=save_show_hidden,
    )

    logger.info("Session started in %s", current_path)
    try:
        with terminal.raw_mode():
            controller.run()
    finally:
        controller.release()
        logger.info("Session ended in %s", state.current_path)

    sys.stdout.write(f"{FAREWELL_MESSAGE}\n")
    sys.stdout.flush()


__all__ = [
    "FAREWELL_MESSAGE",
    "StartupError",
    "TerminalSetupError",
    "resolve_start_path",
    "run_session",
]
