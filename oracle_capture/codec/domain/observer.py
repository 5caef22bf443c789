"""Observer port for the codec domain — defines events in domain language."""

from typing import Protocol


class CodecObserver(Protocol):
    def sample_set_loading_started(self, path: str) -> None: ...

    def sample_set_loading_completed(
        self, path: str, total_records: int, sha256: str
    ) -> None: ...

    def sample_set_loading_failed(self, path: str, reason: str) -> None: ...

    def sample_set_written(self, destination: str, total_records: int) -> None: ...
