"""JSON export: structured envelope."""

from __future__ import annotations

import json
from collections.abc import Sequence

from epochtool.clock import Reference
from epochtool.guesser import ConversionResult
from epochtool.schemas import ConversionRecord, ResultsEnvelope


def export_json(
    results: Sequence[ConversionResult],
    reference: Reference,
    indent: int = 2,
) -> str:
    """Export conversion results as structured JSON."""
    envelope = ResultsEnvelope(
        epoch_results_array=[
            ConversionRecord.from_result(r, reference) for r in results
        ],
    )
    return json.dumps(
        envelope.model_dump(mode="json"),
        indent=indent,
        ensure_ascii=False,
    )


def export_single_result_json(
    result: ConversionResult,
    reference: Reference,
    indent: int = 2,
) -> str:
    """Export a single conversion result as JSON."""
    return json.dumps(
        ConversionRecord.from_result(result, reference).model_dump(
            mode="json"
        ),
        indent=indent,
        ensure_ascii=False,
    )
