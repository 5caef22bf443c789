"""ReplayReport — the outcome of replaying a SampleSet against a candidate."""

from pydantic import BaseModel, Field

from oracle_capture.sampling.domain.record import InputTuple
from oracle_capture.sampling.domain.scalar import Scalar


class Mismatch(BaseModel, frozen=True):
    """A record the candidate did not reproduce.

    actual is the encoded candidate output, or None when the candidate raised;
    error then carries the exception text.
    """

    line_number: int = Field(ge=1)
    inputs: InputTuple
    expected: Scalar
    actual: str | None = None
    error: str | None = None


class ReplayReport(BaseModel, frozen=True):
    total: int = Field(ge=0)
    mismatches: tuple[Mismatch, ...] = Field(default=())

    @property
    def passed(self) -> bool:
        return not self.mismatches
