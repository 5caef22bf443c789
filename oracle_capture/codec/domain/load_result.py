"""SampleSetLoadResult — a loaded SampleSet plus the integrity hash of its file."""

from pydantic import BaseModel, Field

from oracle_capture.sampling.domain.record import SampleSet


class SampleSetLoadResult(BaseModel, frozen=True):
    """Immutable value object returned by SampleSetFileLoader.

    The SHA-256 hex digest of the raw file bytes lets callers record which
    exact capture a replay was checked against.
    """

    sample_set: SampleSet
    sha256: str = Field(min_length=64, max_length=64)
