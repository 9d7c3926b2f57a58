"""Export module: result rendering by format."""

from collections.abc import Sequence

from rich.text import Text

from epochtool.clock import Reference
from epochtool.constants import OutputFormat
from epochtool.export.json_export import (
    export_json,
    export_single_result_json,
)
from epochtool.export.text import export_text, render_result
from epochtool.guesser import ConversionResult

__all__ = [
    "export",
    "export_json",
    "export_single_result_json",
    "export_text",
    "render_result",
]


def export(
    results: Sequence[ConversionResult],
    reference: Reference,
    fmt: str = "text",
    show_all: bool = False,
) -> str | Text:
    """Dispatch export by format string.

    Returns ``str`` for JSON, rich ``Text`` for terminal output.
    """
    if fmt == OutputFormat.JSON:
        return export_json(results, reference)
    if fmt == OutputFormat.TEXT:
        return export_text(results, reference, show_all=show_all)
    valid = ", ".join(OutputFormat)
    msg = f"Unsupported format: {fmt}. Use: {valid}"
    raise ValueError(msg)
