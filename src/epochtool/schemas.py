"""Pydantic records for the external encoding of results."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from epochtool.candidates import CandidateMatch
from epochtool.catalog import EpochDefinition
from epochtool.clock import Reference
from epochtool.guesser import ConversionResult


class EpochRecord(BaseModel):
    """An epoch definition plus "now" in its elapsed seconds."""

    epoch_name: str
    epoch_uses: list[str] = Field(default_factory=list)
    epoch_date: datetime
    now_local: int
    now_utc: int
    prevalence: int = Field(ge=0, le=5)

    @classmethod
    def from_epoch(
        cls, epoch: EpochDefinition, reference: Reference
    ) -> EpochRecord:
        return cls(
            epoch_name=epoch.name,
            epoch_uses=list(epoch.uses),
            epoch_date=epoch.start,
            now_local=epoch.now_local(reference),
            now_utc=epoch.now_utc(reference),
            prevalence=epoch.prevalence,
        )


class CandidateRecord(BaseModel):
    """One input integer read under one epoch."""

    input_number: int
    epoch_type: EpochRecord
    converted_date_local: datetime | None = None
    converted_date_utc: datetime | None = None

    @classmethod
    def from_candidate(
        cls, candidate: CandidateMatch, reference: Reference
    ) -> CandidateRecord:
        return cls(
            input_number=candidate.number,
            epoch_type=EpochRecord.from_epoch(candidate.epoch, reference),
            converted_date_local=candidate.local,
            converted_date_utc=candidate.utc,
        )


class ConversionRecord(BaseModel):
    """All readings and the ranking for one input integer."""

    input_number: int
    epoch_types: list[EpochRecord] = Field(
        default_factory=lambda: list[EpochRecord]()
    )
    all_results: list[CandidateRecord] = Field(
        default_factory=lambda: list[CandidateRecord]()
    )
    most_likely_epoch: EpochRecord

    @classmethod
    def from_result(
        cls, result: ConversionResult, reference: Reference
    ) -> ConversionRecord:
        return cls(
            input_number=result.number,
            epoch_types=[
                EpochRecord.from_epoch(e, reference) for e in result.ranked
            ],
            all_results=[
                CandidateRecord.from_candidate(c, reference)
                for c in result.candidates
            ],
            most_likely_epoch=EpochRecord.from_epoch(
                result.most_likely, reference
            ),
        )


class ResultsEnvelope(BaseModel):
    """Top-level JSON document."""

    epoch_results_array: list[ConversionRecord] = Field(
        default_factory=lambda: list[ConversionRecord]()
    )
