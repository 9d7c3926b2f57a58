"""Bulk entry point: normalize, convert, rank, package."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import NamedTuple

from epochtool.candidates import CandidateMatch, candidates_for
from epochtool.catalog import EpochCatalog, EpochDefinition, default_catalog
from epochtool.clock import Reference
from epochtool.errors import BatchParseError
from epochtool.normalizer import normalize
from epochtool.ranker import rank

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Everything known about one parsed input integer."""

    number: int
    candidates: tuple[CandidateMatch, ...]  # catalog order
    ranked: EpochCatalog  # closest first
    most_likely: EpochDefinition

    def ranked_candidates(self) -> list[CandidateMatch]:
        """Candidates reordered to follow ``ranked``."""
        by_epoch = {id(c.epoch): c for c in self.candidates}
        return [by_epoch[id(e)] for e in self.ranked]


class GuessOutcome(NamedTuple):
    """Results, unparseable strings and the advisory error.

    Unpacks as ``results, bad_strings, error``.
    """

    results: tuple[ConversionResult, ...] = ()
    bad_strings: tuple[str, ...] = ()
    error: BatchParseError | None = None


def convert(
    number: int,
    catalog: EpochCatalog,
    reference: Reference,
) -> ConversionResult:
    """Build the result record for a single integer."""
    ranked = rank(catalog, number, reference.now)
    return ConversionResult(
        number=number,
        candidates=candidates_for(number, catalog, reference.utc_offset),
        ranked=ranked,
        most_likely=ranked[0],
    )


def guess(
    raw_strings: Sequence[str],
    catalog: EpochCatalog | None = None,
    reference: Reference | None = None,
) -> GuessOutcome:
    """Guess the most likely epoch for every parseable string.

    ``reference`` is sampled once here when not supplied, so every
    candidate and ranking in the outcome agrees on "now".
    """
    if catalog is None:
        catalog = default_catalog()
    if not catalog:
        msg = "Cannot guess against an empty catalog"
        raise ValueError(msg)
    if reference is None:
        reference = Reference.sample()

    normalized = normalize(raw_strings)
    results = tuple(
        convert(n, catalog, reference) for n in normalized.numbers
    )
    logger.debug(
        "Guessed %d numbers against %d epochs (%d bad strings)",
        len(results),
        len(catalog),
        len(normalized.bad_strings),
    )
    return GuessOutcome(
        results=results,
        bad_strings=normalized.bad_strings,
        error=normalized.error,
    )
