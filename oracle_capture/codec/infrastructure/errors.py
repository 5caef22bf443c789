"""Error types raised while reading a persisted SampleSet."""

from oracle_capture.core.errors import OracleError


class ParseError(OracleError):
    """Raised when a persisted record line is malformed."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(
            f"Failed to parse sample line {line_number} {line!r}: {reason}"
        )


class SampleSetLoadError(OracleError):
    """Raised when a sample file cannot be opened or decoded."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load sample set: {reason}")
