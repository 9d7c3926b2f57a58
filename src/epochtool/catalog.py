"""Epoch definitions and the built-in catalog.

The catalog is built once from literal start dates, validated as a
whole, and never mutated afterwards. Callers pass it explicitly;
derived orderings are always new catalogs.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import NamedTuple, overload

from epochtool.clock import Reference, elapsed_seconds
from epochtool.constants import (
    EPOCH_LITERAL_FORMAT,
    MAX_PREVALENCE,
    MIN_PREVALENCE,
)
from epochtool.errors import CatalogConstructionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EpochDefinition:
    """A named reference start instant used by a computing convention."""

    name: str
    uses: tuple[str, ...]
    start: datetime  # aware, UTC
    prevalence: int  # 0..5, display hint only

    def seconds_since_start(self, moment: datetime) -> int:
        return elapsed_seconds(moment, self.start)

    def now_utc(self, reference: Reference) -> int:
        """The reference instant in this epoch's elapsed seconds."""
        return self.seconds_since_start(reference.now)

    def now_local(self, reference: Reference) -> int:
        """Like :meth:`now_utc`, shifted by the local UTC offset."""
        return self.now_utc(reference) + reference.offset_seconds

    def describe(self, reference: Reference) -> str:
        """Multi-line human-readable summary."""
        return (
            f"Name of Epoch: {self.name}\n"
            f"Used for: {', '.join(self.uses)}\n"
            f"Started On (UTC): {format_instant(self.start)}\n"
            "Current UTC Time in Epoch Seconds: "
            f"{self.now_utc(reference)}\n"
            "Current Local Time in Epoch Seconds: "
            f"{self.now_local(reference)}\n"
        )


class EpochSpec(NamedTuple):
    """Raw literal form of an epoch, before construction."""

    name: str
    uses: tuple[str, ...]
    literal: str
    prevalence: int


@dataclass(frozen=True)
class EpochCatalog:
    """Ordered, immutable collection of epoch definitions.

    Insertion order is the canonical display order. Names are unique.
    """

    epochs: tuple[EpochDefinition, ...] = ()

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for epoch in self.epochs:
            if epoch.name in seen:
                msg = f"Duplicate epoch name: {epoch.name}"
                raise ValueError(msg)
            seen.add(epoch.name)

    def __iter__(self) -> Iterator[EpochDefinition]:
        return iter(self.epochs)

    def __len__(self) -> int:
        return len(self.epochs)

    @overload
    def __getitem__(self, index: int) -> EpochDefinition: ...

    @overload
    def __getitem__(self, index: slice) -> EpochCatalog: ...

    def __getitem__(
        self, index: int | slice
    ) -> EpochDefinition | EpochCatalog:
        if isinstance(index, slice):
            return EpochCatalog(self.epochs[index])
        return self.epochs[index]

    @property
    def names(self) -> list[str]:
        return [e.name for e in self.epochs]

    def get(self, name: str) -> EpochDefinition | None:
        for epoch in self.epochs:
            if epoch.name == name:
                return epoch
        return None

    def subset(self, names: Iterable[str]) -> EpochCatalog:
        """New catalog restricted to ``names``, in canonical order."""
        wanted = set(names)
        unknown = wanted - set(self.names)
        if unknown:
            msg = f"Unknown epoch names: {', '.join(sorted(unknown))}"
            raise KeyError(msg)
        return EpochCatalog(
            tuple(e for e in self.epochs if e.name in wanted)
        )

    def extended(self, *epochs: EpochDefinition) -> EpochCatalog:
        """New catalog with ``epochs`` appended; names must stay unique."""
        return EpochCatalog(self.epochs + tuple(epochs))


# ── Built-in epochs ──────────────────────────────────────

BUILTIN_EPOCHS: tuple[EpochSpec, ...] = (
    EpochSpec(
        "CommonEra",
        (
            "Common Era", "ISO 2014", "RFC 3339", "Microsoft .NET",
            "Go", "REXX", "Rata Die",
        ),
        "0001-01-01T00:00:00Z",
        1,
    ),
    EpochSpec(
        "Windows",
        ("Windows", "NTFS", "COBOL"),
        "1601-01-01T00:00:00Z",
        5,
    ),
    EpochSpec(
        "VMS",
        (
            "VMS", "United States Naval Observatory",
            "DVB SI 16-bit day stamps", "Astronomy-related",
        ),
        "1858-11-17T00:00:00Z",
        3,
    ),
    EpochSpec(
        "Microsoft COM",
        (
            "Microsoft COM DATE", "Object Pascal", "LibreOffice Calc",
            "Google Sheets",
            "Technical internal value used by Microsoft Excel",
        ),
        "1899-12-30T00:00:00Z",
        4,
    ),
    EpochSpec(
        "Microsoft Excel",
        ("Microsoft Excel", "Lotus 1-2-3"),
        "1899-12-31T00:00:00Z",
        3,
    ),
    EpochSpec(
        "NTP",
        (
            "Network Time Protocol", "IBM CICS", "Mathematica",
            "RISC OS", "VME", "Common Lisp", "Michigan Terminal System",
        ),
        "1900-01-01T00:00:00Z",
        2,
    ),
    EpochSpec(
        "Mac Classic",
        (
            "Apple Inc.'s classic Mac OS", "LabVIEW", "Palm OS", "MP4",
            "Microsoft Excel (optionally)", "IGOR Pro",
        ),
        "1904-01-01T00:00:00Z",
        2,
    ),
    EpochSpec(
        "Unix",
        (
            "Unix",
            "Unix Variants (Linux, MacOS, Solaris, BSD, etc...)",
            "POSIX",
        ),
        "1970-01-01T00:00:00Z",
        5,
    ),
    EpochSpec(
        "FAT",
        (
            "FAT12", "FAT16", "FAT32", "exFAT filesystems", "IBM BIOS",
            "INT 1Ah", "DOS", "OS/2",
        ),
        "1980-01-01T00:00:00Z",
        5,
    ),
    # Very close to FAT
    EpochSpec(
        "GPS",
        ("Qualcomm BREW", "GPS", "ATSC 32-bit time stamps"),
        "1980-01-06T00:00:00Z",
        2,
    ),
    # Very close to Mac OS X
    EpochSpec(
        "PostgreSQL",
        ("PostgreSQL", "AppleSingle", "AppleDouble", "ZigBee UTCTime"),
        "2000-01-01T00:00:00Z",
        3,
    ),
    EpochSpec(
        "Mac OS X",
        ("OS X", "Apple Cocoa"),
        "2001-01-01T00:00:00Z",
        5,
    ),
)


# ── Construction ─────────────────────────────────────────


def parse_epoch_literal(text: str) -> datetime:
    """Parse a ``YYYY-MM-DDTHH:MM:SSZ`` literal to an aware UTC datetime."""
    try:
        parsed = datetime.strptime(text, EPOCH_LITERAL_FORMAT)
    except ValueError as exc:
        msg = f"Epoch literal {text!r} does not match {EPOCH_LITERAL_FORMAT}"
        raise CatalogConstructionError(msg) from exc
    return parsed.replace(tzinfo=UTC)


def build_catalog(specs: Sequence[EpochSpec]) -> EpochCatalog:
    """Construct a whole catalog, failing on the first bad spec."""
    epochs: list[EpochDefinition] = []
    seen: set[str] = set()
    for spec in specs:
        if spec.name in seen:
            msg = f"Duplicate epoch name: {spec.name}"
            raise CatalogConstructionError(msg)
        if not MIN_PREVALENCE <= spec.prevalence <= MAX_PREVALENCE:
            msg = (
                f"Epoch {spec.name} prevalence {spec.prevalence} "
                f"outside {MIN_PREVALENCE}..{MAX_PREVALENCE}"
            )
            raise CatalogConstructionError(msg)
        seen.add(spec.name)
        epochs.append(
            EpochDefinition(
                name=spec.name,
                uses=tuple(spec.uses),
                start=parse_epoch_literal(spec.literal),
                prevalence=spec.prevalence,
            )
        )
    logger.debug("Built catalog of %d epochs", len(epochs))
    return EpochCatalog(tuple(epochs))


@functools.cache
def default_catalog() -> EpochCatalog:
    """The built-in twelve-epoch catalog, constructed once."""
    return build_catalog(BUILTIN_EPOCHS)


def verify_catalog(catalog: EpochCatalog, now: datetime) -> None:
    """Startup self-check: every epoch start lies strictly in the past."""
    for epoch in catalog:
        if epoch.seconds_since_start(now) <= 0:
            msg = (
                f"Epoch {epoch.name} starts at "
                f"{format_instant(epoch.start)}, not before "
                f"{format_instant(now)}"
            )
            raise CatalogConstructionError(msg)


def format_instant(moment: datetime) -> str:
    """RFC 3339 rendering, ``Z`` for UTC."""
    text = moment.isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text
