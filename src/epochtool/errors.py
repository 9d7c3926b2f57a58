"""Error taxonomy and classification.

Classifies exceptions by category to enable:
- Advisory errors for malformed input (returned, never raised)
- Distinct "nothing to convert" vs "nothing parsed" reporting
- Stable process exit codes at the command-line layer
"""

from __future__ import annotations

from collections.abc import Sequence

from epochtool.constants import ExitCode


class EpochToolError(Exception):
    """Base class for every error this package defines."""


class CatalogConstructionError(EpochToolError):
    """A built-in epoch definition is malformed.

    This is a programming defect, caught once by the startup
    self-check, never per request.
    """


class BatchParseError(EpochToolError):
    """At least one input string was not converted.

    Returned alongside the successfully parsed values; callers
    should inspect ``bad_strings`` rather than the message.
    """

    def __init__(self, bad_strings: Sequence[str]) -> None:
        super().__init__("Some strings not converted, see bad_strings")
        self.bad_strings = tuple(bad_strings)


class NoInputError(EpochToolError):
    """No input strings came from any source."""


class EmptyUsableInputError(EpochToolError):
    """Input existed, but zero integers survived normalization."""


class InputReadError(EpochToolError):
    """An input source (stdin) could not be read."""


class ClipboardError(EpochToolError):
    """The system clipboard could not be read."""


_EXIT_CODES: tuple[tuple[type[Exception], ExitCode], ...] = (
    (NoInputError, ExitCode.NO_INPUT),
    (EmptyUsableInputError, ExitCode.NO_NUMBERS),
    (InputReadError, ExitCode.STDIN_ERROR),
    (ClipboardError, ExitCode.CLIPBOARD_ERROR),
    (TypeError, ExitCode.SERIALIZATION_ERROR),
    (ValueError, ExitCode.SERIALIZATION_ERROR),
)


def exit_code_for(error: Exception) -> ExitCode | None:
    """Map an error to the exit code the CLI reports.

    Serialization failures surface as ``TypeError``/``ValueError``
    from the JSON encoder. Returns None for anything unmapped,
    including ``CatalogConstructionError``; callers re-raise those.
    """
    if isinstance(error, CatalogConstructionError):
        return None
    for error_type, code in _EXIT_CODES:
        if isinstance(error, error_type):
            return code
    return None
