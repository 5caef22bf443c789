"""Error types raised while resolving and evaluating a reference function."""

from oracle_capture.core.errors import OracleError
from oracle_capture.sampling.domain.record import InputTuple


class EvaluationError(OracleError):
    """Raised when the reference function fails on a generated input tuple."""

    def __init__(self, index: int, inputs: InputTuple, reason: str) -> None:
        self.index = index
        self.inputs = inputs
        self.reason = reason
        super().__init__(
            f"Failed to evaluate reference on sample {index} with inputs"
            f" {inputs!r}: {reason}"
        )


class ReferenceLoadError(OracleError):
    """Raised when a reference target cannot be imported or is not callable."""

    def __init__(self, target: str, reason: str) -> None:
        self.target = target
        super().__init__(f"Failed to load reference '{target}': {reason}")
