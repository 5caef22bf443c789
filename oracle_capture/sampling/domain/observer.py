"""Observer port for the sampling domain — defines events in domain language."""

from typing import Protocol


class SamplingObserver(Protocol):
    """Observer port emitting structured events while a SampleSet is generated.

    Implementations may log to structlog, render progress, or record for tests.
    """

    def sampling_started(
        self,
        reference: str,
        signature: str,
        count: int,
        size: int,
        seed: int,
        seed_source: str,
    ) -> None: ...

    def sample_evaluated(self, index: int, inputs: str, output: str) -> None: ...

    def sample_skipped(self, index: int, inputs: str, reason: str) -> None: ...

    def sampling_failed(self, index: int, inputs: str, reason: str) -> None: ...

    def sampling_completed(
        self,
        total_records: int,
        total_skipped: int,
        elapsed_seconds: float,
    ) -> None: ...
