"""Error types raised by config infrastructure."""

from pathlib import Path

from oracle_capture.core.errors import OracleError


class ConfigurationError(OracleError):
    """Raised when configuration is invalid; always before generation begins."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate configuration: {reason}")


class ConfigLoadError(OracleError):
    """Raised when the config file cannot be opened or read."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Failed to load config: file not found: {path}")
