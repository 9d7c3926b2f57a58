"""Human-readable rendering with rich styles.

The most likely epoch is highlighted; with ``show_all`` every
candidate follows in ranked order, the runners-up in yellow and
rarely used epochs dimmed.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from rich.text import Text

from epochtool.candidates import CandidateMatch
from epochtool.catalog import format_instant
from epochtool.clock import Reference
from epochtool.constants import LOW_PREVALENCE
from epochtool.guesser import ConversionResult

MOST_LIKELY_STYLE = "bright_green"
RANK_STYLES: dict[int, str] = {
    1: "bright_yellow",
    2: "yellow",
}
LOW_PREVALENCE_STYLE = "dim"

_DIVIDER = "-" * 9


def _reading(moment: datetime | None) -> str:
    if moment is None:
        return "out of range"
    return format_instant(moment)


def _candidate_style(rank: int, candidate: CandidateMatch) -> str:
    if candidate.epoch.prevalence < LOW_PREVALENCE:
        return LOW_PREVALENCE_STYLE
    return RANK_STYLES.get(rank, "")


def render_result(
    result: ConversionResult,
    reference: Reference,
    show_all: bool = False,
) -> Text:
    """Render one conversion result."""
    out = Text()
    out.append(f"For Input Number: {result.number}\n")
    out.append(f"{_DIVIDER}Most Likely Result{_DIVIDER}\n")
    out.append(
        result.most_likely.describe(reference), style=MOST_LIKELY_STYLE
    )
    if not show_all:
        return out

    out.append(f"{_DIVIDER}All Results{_DIVIDER}\n")
    for rank, candidate in enumerate(result.ranked_candidates()):
        block = (
            f"{result.number} in this Epoch:\n"
            f" Local - {_reading(candidate.local)}\n"
            f" UTC - {_reading(candidate.utc)}\n"
            f"{candidate.epoch.describe(reference)}\n"
        )
        out.append(block, style=_candidate_style(rank, candidate))
    return out


def export_text(
    results: Sequence[ConversionResult],
    reference: Reference,
    show_all: bool = False,
) -> Text:
    """Render every result, separated by blank lines."""
    return Text("\n").join(
        render_result(r, reference, show_all=show_all) for r in results
    )
