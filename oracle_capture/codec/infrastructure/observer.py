"""Structlog implementation of the CodecObserver port."""

import structlog


class StructlogCodecObserver:
    """Delegates codec domain events to structlog.

    Satisfies the CodecObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def sample_set_loading_started(self, path: str) -> None:
        self._log.info("codec.loading_started", path=path)

    def sample_set_loading_completed(
        self, path: str, total_records: int, sha256: str
    ) -> None:
        self._log.info(
            "codec.loading_completed",
            path=path,
            total_records=total_records,
            sha256=sha256,
        )

    def sample_set_loading_failed(self, path: str, reason: str) -> None:
        self._log.error("codec.loading_failed", path=path, reason=reason)

    def sample_set_written(self, destination: str, total_records: int) -> None:
        self._log.info(
            "codec.written", destination=destination, total_records=total_records
        )
