"""Public package surface for dirnav.

Exports ``main`` for programmatic CLI invocation.
Most implementation lives in submodules under ``dirnav``.
"""

from __future__ import annotations

import logging

# The screen belongs to the TUI; log records only go somewhere when
# ``--log-file`` attaches a handler.
logging.getLogger(__name__).addHandler(logging.NullHandler())


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
