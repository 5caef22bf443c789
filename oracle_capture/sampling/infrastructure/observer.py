"""StructlogSamplingObserver — production observer that delegates to structlog."""

import structlog


class StructlogSamplingObserver:
    """Logs sampling domain events to structlog.

    Does NOT inherit from SamplingObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def sampling_started(
        self,
        reference: str,
        signature: str,
        count: int,
        size: int,
        seed: int,
        seed_source: str,
    ) -> None:
        self._log.info(
            "sampling.started",
            reference=reference,
            signature=signature,
            count=count,
            size=size,
            seed=seed,
            seed_source=seed_source,
        )

    def sample_evaluated(self, index: int, inputs: str, output: str) -> None:
        self._log.debug(
            "sampling.sample_evaluated", index=index, inputs=inputs, output=output
        )

    def sample_skipped(self, index: int, inputs: str, reason: str) -> None:
        self._log.warning(
            "sampling.sample_skipped", index=index, inputs=inputs, reason=reason
        )

    def sampling_failed(self, index: int, inputs: str, reason: str) -> None:
        self._log.error("sampling.failed", index=index, inputs=inputs, reason=reason)

    def sampling_completed(
        self,
        total_records: int,
        total_skipped: int,
        elapsed_seconds: float,
    ) -> None:
        self._log.info(
            "sampling.completed",
            total_records=total_records,
            total_skipped=total_skipped,
            elapsed_seconds=round(elapsed_seconds, 3),
        )
