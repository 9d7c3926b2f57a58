"""Input acquisition: gather candidate number strings from every source.

Every source passes through the same digit-run extraction before
reaching the normalizer, so arguments, stdin and the clipboard behave
alike.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TextIO

import pyperclip

from epochtool.errors import ClipboardError, InputReadError, NoInputError
from epochtool.normalizer import numbers_in_strings

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"

# Clipboard text is split on each of these in turn
CLIPBOARD_SEPARATORS = ("\n", "\r\n", "\t", ",")


def strings_from_args(args: Iterable[str]) -> list[str]:
    """Digit runs from command-line arguments, skipping the stdin marker."""
    return numbers_in_strings(a for a in args if a != STDIN_MARKER)


def strings_from_stream(stream: TextIO) -> list[str]:
    """Digit runs from whitespace-separated tokens in ``stream``."""
    try:
        text = stream.read()
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Unable to read input stream: {exc}"
        raise InputReadError(msg) from exc
    return numbers_in_strings(text.split())


def strings_from_clipboard() -> list[str]:
    """Digit runs from the system clipboard text, de-duplicated.

    Raises :class:`ClipboardError` when no clipboard mechanism is
    available on this platform.
    """
    try:
        text = pyperclip.paste()
    except pyperclip.PyperclipException as exc:
        msg = f"Unable to read data from clipboard: {exc}"
        raise ClipboardError(msg) from exc
    collected: list[str] = []
    for separator in CLIPBOARD_SEPARATORS:
        collected.extend(numbers_in_strings(text.split(separator)))
    return dedupe(collected)


def dedupe(strings: Iterable[str]) -> list[str]:
    """Drop repeats, keeping first occurrences in order."""
    return list(dict.fromkeys(strings))


def collect_inputs(
    args: Iterable[str],
    stream: TextIO | None = None,
    clipboard: bool = False,
) -> list[str]:
    """Combine stdin (when given), arguments and the clipboard.

    Sources are read in that order and de-duplicated. Raises
    :class:`NoInputError` when no source yields anything.
    """
    collected: list[str] = []
    if stream is not None:
        collected.extend(strings_from_stream(stream))
    collected.extend(strings_from_args(args))
    if clipboard:
        collected.extend(strings_from_clipboard())
    unique = dedupe(collected)
    if not unique:
        msg = "No data from command line, clipboard, or stdin"
        raise NoInputError(msg)
    logger.debug(
        "Collected %d input strings (%d before de-duplication)",
        len(unique),
        len(collected),
    )
    return unique
