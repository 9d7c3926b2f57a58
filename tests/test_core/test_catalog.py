"""Tests for epoch definitions, catalog construction and self-check."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from epochtool.catalog import (
    BUILTIN_EPOCHS,
    EpochCatalog,
    EpochDefinition,
    EpochSpec,
    build_catalog,
    default_catalog,
    format_instant,
    parse_epoch_literal,
    verify_catalog,
)
from epochtool.clock import Reference
from epochtool.errors import CatalogConstructionError

CANONICAL_ORDER = [
    "CommonEra",
    "Windows",
    "VMS",
    "Microsoft COM",
    "Microsoft Excel",
    "NTP",
    "Mac Classic",
    "Unix",
    "FAT",
    "GPS",
    "PostgreSQL",
    "Mac OS X",
]


class TestDefaultCatalog:
    def test_has_twelve_epochs_in_canonical_order(
        self, catalog: EpochCatalog
    ) -> None:
        assert catalog.names == CANONICAL_ORDER

    def test_every_literal_parses(self) -> None:
        for spec in BUILTIN_EPOCHS:
            parsed = parse_epoch_literal(spec.literal)
            assert parsed.tzinfo is UTC

    def test_every_epoch_lies_in_the_past(
        self, catalog: EpochCatalog
    ) -> None:
        """Now, in each epoch's seconds, is strictly positive."""
        reference = Reference.sample()
        for epoch in catalog:
            assert epoch.now_utc(reference) > 0, epoch.name

    def test_self_check_passes_now(self, catalog: EpochCatalog) -> None:
        verify_catalog(catalog, datetime.now(UTC))

    def test_is_built_once(self) -> None:
        assert default_catalog() is default_catalog()

    def test_prevalence_within_bounds(self, catalog: EpochCatalog) -> None:
        assert all(0 <= e.prevalence <= 5 for e in catalog)

    def test_unix_start(self, catalog: EpochCatalog) -> None:
        unix = catalog.get("Unix")
        assert unix is not None
        assert unix.start == datetime(1970, 1, 1, tzinfo=UTC)
        assert unix.prevalence == 5


class TestParseEpochLiteral:
    def test_year_one(self) -> None:
        assert parse_epoch_literal("0001-01-01T00:00:00Z") == datetime(
            1, 1, 1, tzinfo=UTC
        )

    @pytest.mark.parametrize(
        "literal",
        [
            "1970-01-01 00:00:00",
            "1970-01-01T00:00:00",
            "1970-13-01T00:00:00Z",
            "",
        ],
    )
    def test_malformed_literal_raises(self, literal: str) -> None:
        with pytest.raises(CatalogConstructionError):
            parse_epoch_literal(literal)


class TestBuildCatalog:
    def test_bad_literal_fails_whole_catalog(self) -> None:
        specs = [
            EpochSpec("Good", ("a",), "1970-01-01T00:00:00Z", 1),
            EpochSpec("Typo", ("b",), "1970-01-01T00:00:00", 1),
        ]
        with pytest.raises(CatalogConstructionError, match="Typo|1970"):
            build_catalog(specs)

    def test_duplicate_name_raises(self) -> None:
        specs = [
            EpochSpec("Same", (), "1970-01-01T00:00:00Z", 1),
            EpochSpec("Same", (), "1980-01-01T00:00:00Z", 1),
        ]
        with pytest.raises(CatalogConstructionError, match="Duplicate"):
            build_catalog(specs)

    def test_prevalence_out_of_range_raises(self) -> None:
        specs = [EpochSpec("Loud", (), "1970-01-01T00:00:00Z", 6)]
        with pytest.raises(CatalogConstructionError, match="prevalence"):
            build_catalog(specs)

    def test_preserves_insertion_order(self) -> None:
        specs = [
            EpochSpec("Late", (), "2000-01-01T00:00:00Z", 1),
            EpochSpec("Early", (), "1900-01-01T00:00:00Z", 1),
        ]
        assert build_catalog(specs).names == ["Late", "Early"]


class TestVerifyCatalog:
    def test_future_epoch_fails(self) -> None:
        now = datetime(2026, 1, 1, tzinfo=UTC)
        future = EpochDefinition(
            name="Future",
            uses=(),
            start=now + timedelta(days=1),
            prevalence=0,
        )
        with pytest.raises(CatalogConstructionError, match="Future"):
            verify_catalog(EpochCatalog((future,)), now)

    def test_epoch_starting_now_fails(self) -> None:
        now = datetime(2026, 1, 1, tzinfo=UTC)
        same = EpochDefinition(name="Now", uses=(), start=now, prevalence=0)
        with pytest.raises(CatalogConstructionError):
            verify_catalog(EpochCatalog((same,)), now)


class TestEpochCatalog:
    def test_subset_keeps_canonical_order(
        self, catalog: EpochCatalog
    ) -> None:
        sub = catalog.subset(["Unix", "CommonEra"])
        assert sub.names == ["CommonEra", "Unix"]
        assert len(catalog) == 12

    def test_subset_unknown_name_raises(
        self, catalog: EpochCatalog
    ) -> None:
        with pytest.raises(KeyError, match="Nope"):
            catalog.subset(["Nope"])

    def test_extended_returns_new_catalog(
        self, catalog: EpochCatalog
    ) -> None:
        custom = EpochDefinition(
            name="Custom",
            uses=("tests",),
            start=datetime(2010, 1, 1, tzinfo=UTC),
            prevalence=0,
        )
        bigger = catalog.extended(custom)
        assert len(bigger) == 13
        assert bigger[-1] is custom
        assert len(catalog) == 12

    def test_extended_rejects_duplicate(
        self, catalog: EpochCatalog
    ) -> None:
        with pytest.raises(ValueError, match="Duplicate"):
            catalog.extended(catalog[0])

    def test_direct_construction_rejects_duplicate_names(self) -> None:
        older = EpochDefinition(
            "Dup", (), datetime(1990, 1, 1, tzinfo=UTC), 1
        )
        newer = EpochDefinition(
            "Dup", (), datetime(2000, 1, 1, tzinfo=UTC), 1
        )
        with pytest.raises(ValueError, match="Duplicate epoch name: Dup"):
            EpochCatalog((older, newer))

    def test_slice_is_catalog(self, catalog: EpochCatalog) -> None:
        head = catalog[:2]
        assert isinstance(head, EpochCatalog)
        assert head.names == ["CommonEra", "Windows"]

    def test_get_missing_is_none(self, catalog: EpochCatalog) -> None:
        assert catalog.get("Missing") is None

    def test_catalog_is_frozen(self, catalog: EpochCatalog) -> None:
        with pytest.raises(AttributeError):
            catalog.epochs = ()  # type: ignore[misc]


class TestEpochDefinition:
    def test_now_local_adds_offset(
        self, catalog: EpochCatalog, reference: Reference
    ) -> None:
        unix = catalog[7]
        assert unix.now_local(reference) == unix.now_utc(reference) + 7200

    def test_now_utc_for_unix(
        self, catalog: EpochCatalog, reference: Reference
    ) -> None:
        unix = catalog.get("Unix")
        assert unix is not None
        assert unix.now_utc(reference) == int(reference.now.timestamp())

    def test_describe(
        self, catalog: EpochCatalog, reference: Reference
    ) -> None:
        unix = catalog.get("Unix")
        assert unix is not None
        text = unix.describe(reference)
        assert "Name of Epoch: Unix\n" in text
        assert "Used for: Unix, " in text
        assert "Started On (UTC): 1970-01-01T00:00:00Z" in text
        assert (
            f"Current UTC Time in Epoch Seconds: {unix.now_utc(reference)}"
            in text
        )
        assert (
            "Current Local Time in Epoch Seconds: "
            f"{unix.now_local(reference)}" in text
        )


def test_format_instant_uses_z_for_utc() -> None:
    assert format_instant(datetime(1970, 1, 1, tzinfo=UTC)) == (
        "1970-01-01T00:00:00Z"
    )
