"""Command-line interface for the monodiff library."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable

from .models import DiffConfig, Granularity, ViewMode, ViewOptions
from .preferences import JsonFilePreferences
from .render import render_text
from .viewer import Viewer


def main(argv: Iterable[str] | None = None) -> int:
    """Entry point for the ``monodiff`` CLI."""

    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.left == "-" and args.right == "-":
        parser.error("Cannot read both inputs from stdin")

    try:
        left_text = _load_input(args.left)
        right_text = _load_input(args.right)
    except OSError as exc:
        parser.error(str(exc))

    viewer = _build_viewer(args)
    model = viewer.compare(left_text, right_text)

    if model.has_changes:
        output = render_text(model, expand_all=args.expand)
        sys.stdout.write(output)
        if not output.endswith("\n"):
            sys.stdout.write("\n")
    return 1 if model.has_changes else 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="monodiff",
        description="Compare two text or JSON documents line by line, word by word, or character by character.",
    )
    parser.add_argument("left", help="Path to the base document or '-' for stdin")
    parser.add_argument("right", help="Path to the target document or '-' for stdin")
    parser.add_argument(
        "--view",
        choices=[mode.value for mode in ViewMode],
        default=None,
        help="Layout of the comparison (default: unified).",
    )
    parser.add_argument(
        "--token",
        choices=[granularity.value for granularity in Granularity],
        default=None,
        help="Comparison unit (default: line).",
    )
    parser.add_argument(
        "--only-changes",
        action="store_true",
        default=None,
        help="Collapse unchanged lines, or clip inline diffs to the surrounding sentences.",
    )
    parser.add_argument(
        "--no-newline-token",
        action="store_true",
        help="Diff whole lines including their line break instead of treating newlines as separate tokens.",
    )
    parser.add_argument(
        "--expand",
        action="store_true",
        help="Print collapsed unchanged runs in full.",
    )
    parser.add_argument(
        "--prefs",
        type=Path,
        default=None,
        help="JSON file used to remember view, token, and only-changes between runs.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_resolve_version()}",
    )
    return parser


def _load_input(identifier: str) -> bytes:
    # Raw bytes; undecodable input is replaced rather than rejected.
    if identifier == "-":
        return sys.stdin.buffer.read()
    return Path(identifier).read_bytes()


def _build_viewer(args: argparse.Namespace) -> Viewer:
    config = DiffConfig(treat_newline_as_token=not args.no_newline_token)
    if args.prefs is not None:
        viewer = Viewer.from_preferences(JsonFilePreferences(args.prefs), config=config)
        viewer.remember_inputs = False
    else:
        viewer = Viewer(ViewOptions(), config=config, remember_inputs=False)

    # Flags override stored preferences; the comparison itself runs once later.
    viewer.configure(view=args.view, granularity=args.token, only_changes=args.only_changes)
    return viewer


def _resolve_version() -> str:
    try:  # pragma: no cover - importlib metadata availability depends on packaging context
        from importlib.metadata import PackageNotFoundError, version
    except ImportError:  # pragma: no cover
        return "0.0.0"

    try:
        return version("monodiff")
    except PackageNotFoundError:
        return "0.0.0"


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
