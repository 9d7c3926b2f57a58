"""Guess which epoch an integer timestamp counts from."""

from epochtool.catalog import (
    EpochCatalog,
    EpochDefinition,
    build_catalog,
    default_catalog,
    verify_catalog,
)
from epochtool.clock import Reference
from epochtool.guesser import ConversionResult, GuessOutcome, guess
from epochtool.normalizer import numbers_in_strings, numbers_in_text
from epochtool.ranker import rank

__version__ = "1.0.0"

__all__ = [
    "ConversionResult",
    "EpochCatalog",
    "EpochDefinition",
    "GuessOutcome",
    "Reference",
    "__version__",
    "build_catalog",
    "default_catalog",
    "guess",
    "numbers_in_strings",
    "numbers_in_text",
    "rank",
    "verify_catalog",
]
