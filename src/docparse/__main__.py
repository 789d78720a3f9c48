"""CLI entry-point for docparse.

Usage:
    python -m docparse show [-c FILE ...] [--force] [--format json|yaml] [--wrapped]
    python -m docparse validate <config.yml>
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from docparse import __version__
from docparse.api import FORMATS, dump, load
from docparse.errors import ConfigurationError
from docparse.utils.exit_codes import ExitCode


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="docparse",
        description="Inspect and check documentation parser configuration.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log loader activity to stderr.",
    )
    sub = p.add_subparsers(dest="command")

    # ── show subcommand ─────────────────────────────────────────────
    show_p = sub.add_parser(
        "show",
        help="Print the effective parser configuration.",
    )
    show_p.add_argument(
        "-c",
        "--config",
        dest="configs",
        type=Path,
        action="append",
        default=[],
        metavar="FILE",
        help="YAML config file to apply; repeat to layer files, later ones win.",
    )
    show_p.add_argument(
        "--force",
        dest="rebuild_cache",
        action="store_true",
        default=False,
        help="Request a full rebuild of the parser cache.",
    )
    show_p.add_argument(
        "--format",
        dest="fmt",
        choices=FORMATS,
        default="json",
        help="Output format (default: json).",
    )
    show_p.add_argument(
        "--wrapped",
        action="store_true",
        default=False,
        help="Render list fields in their wrapped {item-tag: [...]} form.",
    )

    # ── validate subcommand ─────────────────────────────────────────
    val_p = sub.add_parser(
        "validate",
        help="Check the structure of a YAML config file.",
    )
    val_p.add_argument("config", type=Path, help="Path to the YAML config file.")

    return p


def _handle_show(args: argparse.Namespace) -> int:
    try:
        config = load(*args.configs, rebuild_cache=args.rebuild_cache)
    except FileNotFoundError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return ExitCode.ERROR
    except ConfigurationError as e:
        print(f"FAIL: {e}", file=sys.stderr)
        return ExitCode.VIOLATION

    sys.stdout.write(dump(config, fmt=args.fmt, wrapped=args.wrapped))
    if config.should_rebuild_cache():
        print("note: parser cache will be rebuilt", file=sys.stderr)
    return ExitCode.SUCCESS


def _handle_validate(args: argparse.Namespace) -> int:
    try:
        # Reads, schema-checks and decodes; unknown item tags surface here.
        load(args.config)
    except FileNotFoundError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return ExitCode.ERROR
    except ConfigurationError as e:
        print(f"FAIL: {e}", file=sys.stderr)
        return ExitCode.VIOLATION
    print("OK")
    return ExitCode.SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an ``ExitCode``."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "show":
        return _handle_show(args)
    if args.command == "validate":
        return _handle_validate(args)

    parser.print_help(sys.stderr)
    return ExitCode.ERROR


if __name__ == "__main__":
    raise SystemExit(main())
