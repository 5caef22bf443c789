"""CompositeSamplingObserver — fans out all events to a list of observers."""

from oracle_capture.sampling.domain.observer import SamplingObserver


class CompositeSamplingObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from SamplingObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[SamplingObserver]) -> None:
        self._observers = observers

    def sampling_started(
        self,
        reference: str,
        signature: str,
        count: int,
        size: int,
        seed: int,
        seed_source: str,
    ) -> None:
        for obs in self._observers:
            obs.sampling_started(
                reference=reference,
                signature=signature,
                count=count,
                size=size,
                seed=seed,
                seed_source=seed_source,
            )

    def sample_evaluated(self, index: int, inputs: str, output: str) -> None:
        for obs in self._observers:
            obs.sample_evaluated(index=index, inputs=inputs, output=output)

    def sample_skipped(self, index: int, inputs: str, reason: str) -> None:
        for obs in self._observers:
            obs.sample_skipped(index=index, inputs=inputs, reason=reason)

    def sampling_failed(self, index: int, inputs: str, reason: str) -> None:
        for obs in self._observers:
            obs.sampling_failed(index=index, inputs=inputs, reason=reason)

    def sampling_completed(
        self,
        total_records: int,
        total_skipped: int,
        elapsed_seconds: float,
    ) -> None:
        for obs in self._observers:
            obs.sampling_completed(
                total_records=total_records,
                total_skipped=total_skipped,
                elapsed_seconds=elapsed_seconds,
            )
