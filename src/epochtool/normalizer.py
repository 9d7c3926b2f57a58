"""Raw strings to signed 64-bit integers, collecting every failure."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from epochtool.constants import INPUT_STRIP_CHARS, INT64_MAX, INT64_MIN
from epochtool.errors import BatchParseError

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?[0-9]+")
_DIGIT_RUN_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class Normalized:
    """Output of :func:`normalize`.

    ``numbers`` keeps input order minus failures; ``error`` is set
    iff ``bad_strings`` is non-empty.
    """

    numbers: tuple[int, ...] = ()
    bad_strings: tuple[str, ...] = ()
    error: BatchParseError | None = None


def parse_int64(text: str) -> int | None:
    """Strict base-10 signed 64-bit parse; None on any failure.

    Only ASCII digits with an optional sign are accepted, so the
    looser forms ``int()`` allows (underscores, non-ASCII digits,
    inner whitespace) fail here.
    """
    if not _INT_RE.fullmatch(text):
        return None
    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


def normalize(raw_strings: Iterable[str]) -> Normalized:
    """Clean and parse each string; never stops at the first failure.

    Per string: strip surrounding whitespace, drop everything from
    the first ``.`` (decimal seconds), then parse. Failures keep
    their trimmed text.
    """
    numbers: list[int] = []
    bad_strings: list[str] = []
    for raw in raw_strings:
        trimmed = raw.strip(INPUT_STRIP_CHARS)
        whole, _, _ = trimmed.partition(".")
        value = parse_int64(whole)
        if value is None:
            bad_strings.append(trimmed)
        else:
            numbers.append(value)

    error = None
    if bad_strings:
        logger.warning(
            "%d of %d strings not converted",
            len(bad_strings),
            len(bad_strings) + len(numbers),
        )
        error = BatchParseError(bad_strings)
    return Normalized(
        numbers=tuple(numbers),
        bad_strings=tuple(bad_strings),
        error=error,
    )


def numbers_in_text(text: str) -> list[str]:
    """Every maximal run of ASCII digits, in order, duplicates kept."""
    return _DIGIT_RUN_RE.findall(text)


def numbers_in_strings(texts: Iterable[str]) -> list[str]:
    """:func:`numbers_in_text` applied to each string, concatenated."""
    found: list[str] = []
    for text in texts:
        found.extend(numbers_in_text(text))
    return found
