"""Sampling configuration models."""

from enum import StrEnum

from pydantic import BaseModel, Field

DEFAULT_COUNT = 200
DEFAULT_SIZE = 100
# Above 2**53 floats stop representing every integer in [-size, size].
MAX_SIZE = 2**53


class FailurePolicy(StrEnum):
    """What generation does when the reference fails on a drawn tuple.

    ABORT stops the run with an EvaluationError. SKIP drops the tuple,
    records a SkippedSample diagnostic and continues without redrawing.
    """

    ABORT = "abort"
    SKIP = "skip"


class SamplingConfig(BaseModel, frozen=True):
    count: int = Field(default=DEFAULT_COUNT, ge=0)
    size: int = Field(default=DEFAULT_SIZE, gt=0, le=MAX_SIZE)
    seed: int | None = Field(default=None, ge=0)
    on_error: FailurePolicy = FailurePolicy.ABORT
