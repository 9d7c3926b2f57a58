"""Candidate dates: one integer read under one epoch."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from epochtool.catalog import EpochCatalog, EpochDefinition
from epochtool.clock import shift


@dataclass(frozen=True)
class CandidateMatch:
    """An input integer converted under one epoch.

    ``local`` is the same instant as ``utc`` read in a fixed offset,
    so its wall clock is start + number + offset seconds. Either
    reading is None when it falls outside years 1..9999.
    """

    number: int
    epoch: EpochDefinition
    utc: datetime | None
    local: datetime | None


def candidate_for(
    number: int,
    epoch: EpochDefinition,
    utc_offset: timedelta,
) -> CandidateMatch:
    """Read ``number`` as seconds since ``epoch``.

    The offset is sampled once by the caller and applied uniformly;
    it is not the offset in force at the target date.
    """
    utc = shift(epoch.start, number)
    local = None
    if utc is not None:
        try:
            local = utc.astimezone(timezone(utc_offset))
        except OverflowError:
            local = None
    return CandidateMatch(
        number=number, epoch=epoch, utc=utc, local=local
    )


def candidates_for(
    number: int,
    catalog: EpochCatalog,
    utc_offset: timedelta,
) -> tuple[CandidateMatch, ...]:
    """One candidate per catalog entry, in catalog order."""
    return tuple(
        candidate_for(number, epoch, utc_offset) for epoch in catalog
    )
