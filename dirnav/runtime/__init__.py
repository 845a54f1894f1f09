"""Interactive runtime: terminal ownership, session state, and the event loop."""

from .app import FAREWELL_MESSAGE, StartupError, resolve_start_path, run_session
from .loop import SessionController
from .navigation import NavigationHistory, back_target, parent_fallback
from .state import SessionState
from .terminal import TerminalController, TerminalGuard, TerminalSetupError

__all__ = [
    "FAREWELL_MESSAGE",
    "NavigationHistory",
    "SessionController",
    "SessionState",
    "StartupError",
    "TerminalController",
    "TerminalGuard",
    "TerminalSetupError",
    "back_target",
    "parent_fallback",
    "resolve_start_path",
    "run_session",
]
