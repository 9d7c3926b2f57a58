"""CLI entry point: ``epochtool 1500000000 3722112000 ...``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from rich.console import Console

from epochtool import __version__
from epochtool.catalog import default_catalog, verify_catalog
from epochtool.clock import Reference
from epochtool.config import Settings
from epochtool.constants import ExitCode
from epochtool.errors import (
    EmptyUsableInputError,
    EpochToolError,
    exit_code_for,
)
from epochtool.export import export_json, export_text
from epochtool.guesser import guess
from epochtool.inputs import STDIN_MARKER, collect_inputs
from epochtool.logging_config import setup_logging

logger = logging.getLogger(__name__)

PROG = "epochtool"


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    if argv is None:
        argv = sys.argv[1:]
    parser = _build_parser()
    if not argv:
        parser.print_help()
        sys.exit(ExitCode.OK)
    args = parser.parse_args(argv)

    if args.version:
        print(f"{PROG} {__version__}")
        return

    sys.exit(_run(args, Settings(), sys.stdin, sys.stdout, sys.stderr))


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=(
            "Guess which epoch an integer timestamp counts from, "
            "by how close each epoch's current value is to it."
        ),
        epilog=(
            f"Pass '{STDIN_MARKER}' to also read numbers from stdin, "
            f"e.g. {PROG} - < stamps.txt. "
            "Unparseable strings are reported on stderr, "
            "except with --clipboard."
        ),
    )
    parser.add_argument(
        "numbers",
        nargs="*",
        help="Numbers to convert (any digit runs are extracted)",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )
    parser.add_argument(
        "--clipboard",
        action="store_true",
        help="Also parse numbers from the system clipboard",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )
    parser.add_argument(
        "--all",
        "-a",
        dest="show_all",
        action="store_true",
        help=(
            "Show every epoch's reading for each number, "
            "not only the closest match"
        ),
    )
    parser.add_argument(
        "--color",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Colorize text output (default: from settings, off)",
    )
    return parser


def _run(
    args: argparse.Namespace,
    settings: Settings,
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
) -> ExitCode:
    """Execute one conversion run and return its exit code."""
    setup_logging(settings.log_level)
    reference = Reference.sample(settings.utc_offset)

    # Startup self-check; a failure here is a defect and propagates
    catalog = default_catalog()
    verify_catalog(catalog, reference.now)

    try:
        strings = collect_inputs(
            args.numbers,
            stdin if STDIN_MARKER in args.numbers else None,
            clipboard=args.clipboard,
        )
    except EpochToolError as exc:
        return _fail(exc, stderr)

    outcome = guess(strings, catalog=catalog, reference=reference)
    if outcome.bad_strings and args.clipboard:
        print(
            "Some strings could not be parsed, "
            "but they will remain hidden in clipboard mode.",
            file=stderr,
        )
    elif outcome.bad_strings:
        print("Could not parse the following input strings:", file=stderr)
        for bad in outcome.bad_strings:
            print(bad, file=stderr)

    if not outcome.results:
        return _fail(
            EmptyUsableInputError(
                "Found no numbers in input, cannot produce results"
            ),
            stderr,
        )

    if args.json:
        try:
            rendered = export_json(
                outcome.results, reference, indent=settings.json_indent
            )
        except (TypeError, ValueError) as exc:
            return _fail(exc, stderr)
        print(rendered, file=stdout)
        return ExitCode.OK

    color = settings.color if args.color is None else args.color
    console = Console(
        file=stdout,
        no_color=not color,
        force_terminal=color,
        # All styles used are 16-color ones
        color_system="standard" if color else None,
        highlight=False,
        soft_wrap=True,
    )
    console.print(
        export_text(outcome.results, reference, show_all=args.show_all)
    )
    return ExitCode.OK


def _fail(error: Exception, stderr: TextIO) -> ExitCode:
    """Report ``error`` on stderr and classify it."""
    code = exit_code_for(error)
    if code is None:
        raise error
    logger.debug("Exiting with %s: %s", code.name, error)
    print(f"Error: {error}", file=stderr)
    return code


if __name__ == "__main__":
    main()
