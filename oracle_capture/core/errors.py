"""Base exception class for all oracle-capture errors."""


class OracleError(Exception):
    """Base class for all oracle-capture errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
