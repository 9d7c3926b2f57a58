"""Closest-match ranking of a catalog against an integer.

Distance is ``|elapsed_seconds(now, start) - number|``. Ranking
runs in two deterministic phases:

1. Stable-sort a copy of the catalog by start instant ascending, so
   the result never depends on catalog insertion order.
2. Tag each entry with its distance and its position in that copy,
   then stable-sort by distance alone. Equal distances keep the
   phase-1 order (older epoch first).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from epochtool.catalog import EpochCatalog, EpochDefinition
from epochtool.clock import require_aware

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoredEpoch:
    """An epoch tagged with its distance and pre-order position."""

    distance: int
    position: int
    epoch: EpochDefinition


def score(
    catalog: EpochCatalog,
    number: int,
    now: datetime,
) -> list[ScoredEpoch]:
    """Scored entries, closest first."""
    require_aware(now)
    by_start = sorted(catalog, key=lambda e: e.start)
    scored = [
        ScoredEpoch(
            distance=abs(epoch.seconds_since_start(now) - number),
            position=i,
            epoch=epoch,
        )
        for i, epoch in enumerate(by_start)
    ]
    scored.sort(key=lambda s: s.distance)
    return scored


def rank(
    catalog: EpochCatalog,
    number: int,
    now: datetime,
) -> EpochCatalog:
    """New catalog ordered by closeness to ``number``.

    The input catalog is never modified; each call returns a fresh
    ordering.
    """
    scored = score(catalog, number, now)
    if scored:
        logger.debug(
            "Ranked %d epochs for %d: closest %s (distance %d)",
            len(scored),
            number,
            scored[0].epoch.name,
            scored[0].distance,
        )
    return EpochCatalog(tuple(s.epoch for s in scored))
