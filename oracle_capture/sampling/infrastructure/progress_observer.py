"""ProgressSamplingObserver — renders a Rich progress bar for a capture run."""

from __future__ import annotations

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)


class ProgressSamplingObserver:
    """Renders one progress bar on stderr, advancing per evaluated or skipped draw.

    Skipped draws are counted in a separate field so the bar still reaches the
    requested count. Only sampling_started, sample_evaluated, sample_skipped,
    sampling_failed and sampling_completed touch the display.

    Pass ``disabled=True`` to suppress all terminal output (useful in tests).

    Does NOT inherit from SamplingObserver (structural typing via Protocol).
    """

    def __init__(self, disabled: bool = False, console: Console | None = None) -> None:
        self._disabled = disabled
        self._console = console or Console(stderr=True)
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None
        self._done = 0
        self._skipped = 0

    @property
    def done(self) -> int:
        return self._done

    @property
    def skipped(self) -> int:
        return self._skipped

    def sampling_started(
        self,
        reference: str,
        signature: str,
        count: int,
        size: int,
        seed: int,
        seed_source: str,
    ) -> None:
        self._done = 0
        self._skipped = 0
        if self._disabled:
            return
        self._progress = Progress(
            TextColumn("[bold]{task.description}"),
            BarColumn(bar_width=40),
            MofNCompleteColumn(),
            TextColumn("[yellow]{task.fields[skipped]} skipped"),
            TimeElapsedColumn(),
            console=self._console,
            transient=False,
        )
        self._task_id = self._progress.add_task(
            f"{reference} seed={seed}", total=count, skipped=0
        )
        self._progress.start()

    def sample_evaluated(self, index: int, inputs: str, output: str) -> None:
        self._done += 1
        self._advance()

    def sample_skipped(self, index: int, inputs: str, reason: str) -> None:
        self._skipped += 1
        self._advance()

    def sampling_failed(self, index: int, inputs: str, reason: str) -> None:
        self._stop()

    def sampling_completed(
        self,
        total_records: int,
        total_skipped: int,
        elapsed_seconds: float,
    ) -> None:
        self._stop()

    def _advance(self) -> None:
        if self._progress is None or self._task_id is None:
            return
        self._progress.update(
            self._task_id,
            completed=self._done + self._skipped,
            skipped=self._skipped,
        )

    def _stop(self) -> None:
        if self._progress is not None:
            self._progress.stop()
        self._progress = None
        self._task_id = None
