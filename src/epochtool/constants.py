"""Shared constants: single source of truth for cross-module values.

All magic strings and numbers that appear in 2+ files belong here.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum

# ── Epoch literals ───────────────────────────────────────

# Every built-in epoch start is written exactly like this:
# YYYY-MM-DDTHH:MM:SSZ
EPOCH_LITERAL_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

MIN_PREVALENCE = 0
MAX_PREVALENCE = 5

# Candidates below this prevalence are rendered dimmed
LOW_PREVALENCE = 3

# ── Integer bounds ───────────────────────────────────────

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

NANOS_PER_SECOND = 1_000_000_000

# Characters stripped from both ends of every input token
INPUT_STRIP_CHARS = " \t\r\n"

# Bound for a configured UTC offset (seconds)
MAX_UTC_OFFSET_SECONDS = 24 * 60 * 60

# ── String Enums ─────────────────────────────────────────


class OutputFormat(StrEnum):
    """Result presentation formats."""

    TEXT = "text"
    JSON = "json"


class ExitCode(IntEnum):
    """Process exit codes.

    Values are stable: never renumber or reuse one.
    """

    OK = 0
    BAD_FLAGS = 2  # argparse's own usage-error code
    NO_INPUT = 3
    NO_NUMBERS = 4
    STDIN_ERROR = 5
    SERIALIZATION_ERROR = 6
    CLIPBOARD_ERROR = 7
