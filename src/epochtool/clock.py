"""Reference instant and elapsed-time arithmetic."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from epochtool.constants import (
    INT64_MAX,
    INT64_MIN,
    NANOS_PER_SECOND,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Reference:
    """The current instant and local UTC offset, sampled together.

    One Reference is shared by every candidate and ranking produced
    in a single call so they are mutually consistent.
    """

    now: datetime
    utc_offset: timedelta = timedelta(0)

    def __post_init__(self) -> None:
        require_aware(self.now)

    @classmethod
    def sample(cls, utc_offset: timedelta | None = None) -> Reference:
        """Read the wall clock and the process zone offset once.

        An explicit ``utc_offset`` replaces the process zone.
        """
        now = datetime.now(UTC)
        if utc_offset is None:
            utc_offset = now.astimezone().utcoffset() or timedelta(0)
        return cls(now=now, utc_offset=utc_offset)

    @property
    def offset_seconds(self) -> int:
        return int(self.utc_offset.total_seconds())


def elapsed_seconds(moment: datetime, start: datetime) -> int:
    """Whole seconds from ``start`` to ``moment``.

    Measured as a signed 64-bit nanosecond duration that saturates
    at its bounds (about 292 years either way), then truncated
    toward zero. Epochs older than the bound all report the same
    saturated value.
    """
    delta = moment - start
    nanos = (
        (delta.days * 86_400 + delta.seconds) * NANOS_PER_SECOND
        + delta.microseconds * 1_000
    )
    nanos = max(INT64_MIN, min(INT64_MAX, nanos))
    whole = abs(nanos) // NANOS_PER_SECOND
    return whole if nanos >= 0 else -whole


def shift(start: datetime, seconds: int) -> datetime | None:
    """``start`` moved by ``seconds``, or None outside years 1..9999."""
    try:
        return start + timedelta(seconds=seconds)
    except OverflowError:
        logger.debug(
            "Shift of %s by %d seconds leaves the calendar range",
            start.isoformat(),
            seconds,
        )
        return None


def require_aware(moment: datetime) -> None:
    """Reject naive datetimes; elapsed time needs a fixed instant."""
    if moment.tzinfo is None or moment.utcoffset() is None:
        msg = (
            f"Reference instant {moment.isoformat()} has no UTC offset; "
            "pass an aware datetime such as datetime.now(UTC)"
        )
        raise ValueError(msg)
