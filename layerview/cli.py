"""Command-line front door for layerview.

Parses CLI options, reads and validates the object batch, and dispatches into
the interactive viewer. Malformed batches are reported without entering the
interactive view.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .app import run_viewer
from .errors import MalformedInputError
from .model import read_batch
from .presentation import MAX_LINES, WRAP_WIDTH
from .ui_theme import available_theme_names


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _nonnegative_int(value: str) -> int:
    """argparse type for depth values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse a parsed object batch one depth level at a time."
    )
    parser.add_argument("path", nargs="?", default="-", help="Batch JSON file, or '-' for stdin (default).")
    parser.add_argument(
        "--depth",
        type=_nonnegative_int,
        default=None,
        help="Starting depth (default: last session depth, else 1).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--style", default="monokai", help="Pygments style name for the inspector.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--nopager", action="store_true", help="Print summaries of the starting level and exit.")
    parser.add_argument(
        "--repeated-only",
        action="store_true",
        help="Only show objects whose type repeats on their level.",
    )
    parser.add_argument(
        "--width",
        type=_positive_int,
        default=WRAP_WIDTH,
        help=f"Summary wrap width (default: {WRAP_WIDTH}).",
    )
    parser.add_argument(
        "--max-lines",
        type=_positive_int,
        default=MAX_LINES,
        help=f"Summary lines shown before truncating (default: {MAX_LINES}).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch layerview on a batch file."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    path = None if args.path == "-" else Path(args.path)
    if path is not None and not path.is_file():
        raise SystemExit(f"Path not found: {path}")

    try:
        batch = read_batch(path)
    except MalformedInputError as exc:
        raise SystemExit(f"Malformed input: {exc}") from exc

    title = "<stdin>" if path is None else path.name
    try:
        run_viewer(
            batch,
            title,
            depth=args.depth,
            style=args.style,
            no_color=args.no_color,
            nopager=args.nopager,
            theme_name=args.theme,
            repeated_types_only=args.repeated_only,
            wrap_width=args.width,
            max_lines=args.max_lines,
        )
    except MalformedInputError as exc:
        raise SystemExit(f"Malformed input: {exc}") from exc


if __name__ == "__main__":
    main()
