"""Top-level OracleConfig aggregate — the root configuration object."""

from pathlib import Path
from typing import TypeAlias

from pydantic import BaseModel, Field

from oracle_capture.config.domain.sampling import SamplingConfig
from oracle_capture.sampling.domain.scalar import ScalarType

ReferenceTarget: TypeAlias = str


class OracleConfig(BaseModel, frozen=True):
    """Root configuration for one capture run.

    parameters and returns override the reference's own annotations when set.
    A None output means standard output.
    """

    reference: ReferenceTarget | None = Field(default=None, min_length=1)
    parameters: list[ScalarType] | None = None
    returns: ScalarType | None = None
    sampling: SamplingConfig = Field(default_factory=SamplingConfig)
    output: Path | None = None
