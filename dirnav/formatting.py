"""String formatting for listing columns: modes, sizes, timestamps, owners."""

from __future__ import annotations

import grp
import pwd
import stat
import time

SIZE_UNITS: tuple[str, ...] = ("B", "K", "M", "G", "T")
MTIME_FORMAT = "%Y-%m-%d %H:%M"


def mode_string(mode: int) -> str:
    """Return an ``ls``-style type+permission string such as ``drwxr-xr-x``."""
    return stat.filemode(mode)


def human_size(size: int) -> str:
    """Render bytes with one decimal and a binary unit suffix, e.g. ``1.5K``."""
    value = float(size)
    unit_idx = 0
    while value >= 1024.0 and unit_idx < len(SIZE_UNITS) - 1:
        value /= 1024.0
        unit_idx += 1
    return f"{value:.1f}{SIZE_UNITS[unit_idx]}"


def format_size(size: int, human_readable: bool) -> str:
    """Size column text: human units or the raw byte count."""
    return human_size(size) if human_readable else str(size)


def format_mtime(epoch_seconds: float) -> str:
    """Local modification time as ``YYYY-MM-DD HH:MM``."""
    return time.strftime(MTIME_FORMAT, time.localtime(epoch_seconds))


def owner_name(uid: int) -> str:
    """Resolve a user id to its login name, falling back to the numeric id."""
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def group_name(gid: int) -> str:
    """Resolve a group id to its name, falling back to the numeric id."""
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)
