"""Command-line front door for dirnav.

Parses startup flags, merges them over persisted defaults, and dispatches to
either the interactive session or the batch listing.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .batch import dump_directory
from .config import load_default_flags, load_theme_name
from .flags import SessionFlags
from .listing.sorting import SORT_NAME, SORT_SIZE, SORT_TIME
from .preview import DEFAULT_STYLE
from .render.help import plain_help_text
from .runtime import StartupError, TerminalSetupError, resolve_start_path, run_session
from .ui_theme import available_theme_names, resolve_theme

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    # ``-h`` selects human-readable sizes, so help lives on ``--help`` only.
    parser = argparse.ArgumentParser(
        prog="dirnav",
        description="Browse a directory interactively in the terminal.",
        epilog=plain_help_text(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("directory", nargs="?", default=".", help="Directory to open (default: current directory).")
    parser.add_argument("--help", action="help", help="Show this message and exit.")
    parser.add_argument("-a", dest="show_hidden", action="store_true", default=None, help="Start with hidden files shown.")
    parser.add_argument("-l", dest="long_format", action="store_true", default=None, help="Start in long format.")
    parser.add_argument(
        "-h",
        dest="human_readable_sizes",
        action="store_true",
        default=None,
        help="Start with human-readable sizes.",
    )
    parser.add_argument("-S", dest="sort_mode", action="store_const", const=SORT_SIZE, help="Start sorted by size.")
    parser.add_argument("-t", dest="sort_mode", action="store_const", const=SORT_TIME, help="Start sorted by time.")
    parser.add_argument("-n", dest="sort_mode", action="store_const", const=SORT_NAME, help="Start sorted by name.")
    parser.add_argument("-d", dest="dirs_only", action="store_true", help="Show directories only.")
    parser.add_argument("-f", dest="files_only", action="store_true", help="Show regular files only.")
    parser.add_argument(
        "-i",
        dest="interactive",
        action="store_const",
        const=True,
        default=True,
        help="Interactive mode (default).",
    )
    parser.add_argument("-b", dest="interactive", action="store_const", const=False, help="Batch mode: list and exit.")
    parser.add_argument("-r", dest="recursive", action="store_true", help="Batch mode: descend into subdirectories.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--style", default=DEFAULT_STYLE, help="Pygments style for file previews.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write debug logs to this file.")
    return parser


def build_flags(args: argparse.Namespace, defaults: SessionFlags) -> SessionFlags:
    """Overlay explicit command-line flags on the persisted defaults."""
    flags = defaults
    for name in ("show_hidden", "long_format", "human_readable_sizes"):
        value = getattr(args, name)
        if value is not None:
            setattr(flags, name, value)
    if args.sort_mode is not None:
        flags.sort_mode = args.sort_mode
    flags.dirs_only = bool(args.dirs_only)
    flags.files_only = bool(args.files_only)
    return flags


def configure_logging(log_file: Path) -> None:
    logging.basicConfig(filename=str(log_file), level=logging.DEBUG, format=LOG_FORMAT)


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run dirnav.

    Exits with status 2 for argument errors and 1 when the start directory or
    the terminal cannot be set up.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.dirs_only and args.files_only:
        parser.error("-d (dirs only) and -f (files only) cannot be combined")
    if args.theme is not None and args.theme.strip().lower() not in available_theme_names():
        parser.error(f"unknown theme {args.theme!r} (choose from {', '.join(available_theme_names())})")
    if args.log_file is not None:
        configure_logging(args.log_file)

    flags = build_flags(args, load_default_flags())

    try:
        if not args.interactive:
            directory = resolve_start_path(args.directory)
            failures = dump_directory(directory, flags, sys.stdout, recursive=args.recursive)
            if failures:
                raise SystemExit(1)
            return
        run_session(
            args.directory,
            flags,
            theme=resolve_theme(args.theme or load_theme_name()),
            preview_style=args.style,
        )
    except (StartupError, TerminalSetupError) as exc:
        raise SystemExit(f"dirnav: {exc}") from None
    except MemoryError:
        raise SystemExit("dirnav: out of memory") from None


if __name__ == "__main__":
    main()
