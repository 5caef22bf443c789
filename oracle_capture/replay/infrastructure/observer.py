"""Structlog implementation of the ReplayObserver port."""

import structlog


class StructlogReplayObserver:
    """Delegates replay domain events to structlog.

    Satisfies the ReplayObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def replay_started(self, candidate: str, total_records: int) -> None:
        self._log.info(
            "replay.started", candidate=candidate, total_records=total_records
        )

    def replay_mismatch(
        self, line_number: int, inputs: str, expected: str, actual: str
    ) -> None:
        self._log.warning(
            "replay.mismatch",
            line_number=line_number,
            inputs=inputs,
            expected=expected,
            actual=actual,
        )

    def replay_completed(self, total_records: int, total_mismatches: int) -> None:
        self._log.info(
            "replay.completed",
            total_records=total_records,
            total_mismatches=total_mismatches,
        )
