"""Persistent JSON config helpers.

Stores startup defaults for the listing flags and the UI theme name.
Missing or malformed config falls back to defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .flags import SessionFlags
from .listing.sorting import SORT_NAME, is_sort_mode

APP_NAME = "dirnav"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

_BOOL_FLAG_KEYS: tuple[str, ...] = ("show_hidden", "long_format", "human_readable_sizes")


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem and serialization errors are ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError):
        pass


def load_default_flags() -> SessionFlags:
    """Build startup flags from config; only well-typed values are honoured."""
    data = load_config()
    flags = SessionFlags()
    for key in _BOOL_FLAG_KEYS:
        value = data.get(key)
        if isinstance(value, bool):
            setattr(flags, key, value)
    sort_mode = data.get("sort_mode")
    flags.sort_mode = sort_mode if is_sort_mode(sort_mode) else SORT_NAME
    return flags


def save_show_hidden(show_hidden: bool) -> None:
    config = load_config()
    config["show_hidden"] = bool(show_hidden)
    save_config(config)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None
