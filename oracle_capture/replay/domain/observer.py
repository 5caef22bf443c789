"""Observer port for the replay domain — defines events in domain language."""

from typing import Protocol


class ReplayObserver(Protocol):
    def replay_started(self, candidate: str, total_records: int) -> None: ...

    def replay_mismatch(
        self, line_number: int, inputs: str, expected: str, actual: str
    ) -> None: ...

    def replay_completed(self, total_records: int, total_mismatches: int) -> None: ...
