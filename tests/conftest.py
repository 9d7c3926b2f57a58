"""Shared test fixtures: fixed reference instant, default catalog."""

import os
from datetime import UTC, datetime, timedelta

import pytest

from epochtool.catalog import EpochCatalog, default_catalog
from epochtool.clock import Reference

FIXED_NOW = datetime(2026, 10, 17, 12, 0, 0, tzinfo=UTC)
UNIX_START = datetime(1970, 1, 1, tzinfo=UTC)


@pytest.fixture
def catalog() -> EpochCatalog:
    return default_catalog()


@pytest.fixture
def reference() -> Reference:
    """A fixed "now" two hours east of UTC."""
    return Reference(now=FIXED_NOW, utc_offset=timedelta(hours=2))


@pytest.fixture
def utc_reference() -> Reference:
    return Reference(now=FIXED_NOW, utc_offset=timedelta(0))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's EPOCHTOOL_* variables out of Settings()."""
    for key in list(os.environ):
        if key.startswith("EPOCHTOOL_"):
            monkeypatch.delenv(key)
