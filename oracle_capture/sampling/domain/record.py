"""SampleRecord, SampleSet and GenerationResult — captured oracle behaviour."""

from typing import TypeAlias

from pydantic import BaseModel, Field

from oracle_capture.sampling.domain.scalar import Scalar, Signature

InputTuple: TypeAlias = tuple[Scalar, ...]


class SampleRecord(BaseModel, frozen=True):
    """One input tuple paired with the output the reference produced for it."""

    inputs: InputTuple
    output: Scalar


class SampleSet(BaseModel, frozen=True):
    """Ordered, immutable collection of SampleRecords in generation order."""

    records: tuple[SampleRecord, ...] = Field(default=())


class SkippedSample(BaseModel, frozen=True):
    """Diagnostic for a draw dropped under the skip policy."""

    index: int = Field(ge=0)
    inputs: InputTuple
    reason: str


class GenerationResult(BaseModel, frozen=True):
    """Immutable value object returned by OracleSampler.generate.

    Carries the captured SampleSet together with the seed that reproduces it,
    the signature it was drawn for, and any draws skipped on failure.
    """

    sample_set: SampleSet
    seed: int = Field(ge=0)
    signature: Signature
    skipped: tuple[SkippedSample, ...] = Field(default=())
