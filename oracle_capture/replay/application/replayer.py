"""Replayer — checks a candidate implementation against a captured SampleSet."""

from collections.abc import Callable

from oracle_capture.codec.domain.scalar_text import encode_fields, encode_scalar
from oracle_capture.replay.domain.observer import ReplayObserver
from oracle_capture.replay.domain.report import Mismatch, ReplayReport
from oracle_capture.sampling.domain.record import SampleRecord, SampleSet
from oracle_capture.sampling.domain.scalar import Scalar, ScalarType, conform_output


class Replayer:
    """Invokes the candidate once per record and collects every mismatch.

    A result is conformed to the recorded output's type the way generation
    conformed the reference's, then compared by encoded text: an int result
    matches a recorded 3.0, nan matches nan, and 1 never matches true.
    """

    def __init__(
        self,
        candidate: Callable[..., object],
        observer: ReplayObserver,
        candidate_name: str = "<candidate>",
    ) -> None:
        self._candidate = candidate
        self._observer = observer
        self._candidate_name = candidate_name

    def replay(self, sample_set: SampleSet) -> ReplayReport:
        """Replay every record, never stopping early, and return a ReplayReport."""
        total = len(sample_set.records)
        self._observer.replay_started(
            candidate=self._candidate_name, total_records=total
        )

        mismatches: list[Mismatch] = []
        for line_number, record in enumerate(sample_set.records, start=1):
            mismatch = self._check(line_number=line_number, record=record)
            if mismatch is None:
                continue
            mismatches.append(mismatch)
            self._observer.replay_mismatch(
                line_number=line_number,
                inputs=encode_fields(record.inputs),
                expected=encode_scalar(record.output),
                actual=mismatch.actual
                if mismatch.actual is not None
                else f"raised {mismatch.error}",
            )

        self._observer.replay_completed(
            total_records=total, total_mismatches=len(mismatches)
        )
        return ReplayReport(total=total, mismatches=tuple(mismatches))

    def _check(self, line_number: int, record: SampleRecord) -> Mismatch | None:
        try:
            raw = self._candidate(*record.inputs)
        except Exception as exc:  # noqa: BLE001
            return Mismatch(
                line_number=line_number,
                inputs=record.inputs,
                expected=record.output,
                error=f"{type(exc).__name__}: {exc}",
            )

        actual = encode_result(value=raw, expected=record.output)
        if actual == encode_scalar(record.output):
            return None
        return Mismatch(
            line_number=line_number,
            inputs=record.inputs,
            expected=record.output,
            actual=actual,
        )


def encode_result(value: object, expected: Scalar) -> str:
    """
    Encode a candidate's result for comparison with a recorded output.

    The result is conformed to the type of expected first, so an int returned
    where a float was recorded is widened as it was at capture time. A result
    that does not conform is encoded as it is, or by repr when it is not a
    scalar at all.
    """
    try:
        conformed = conform_output(value=value, expected=ScalarType.of(expected))
    except (TypeError, OverflowError):
        return _encode_raw(value)
    return encode_scalar(conformed)


def result_matches(value: object, expected: Scalar) -> bool:
    """Return True if a candidate's result reproduces the recorded output."""
    return encode_result(value=value, expected=expected) == encode_scalar(expected)


def _encode_raw(value: object) -> str:
    try:
        return encode_scalar(value)  # type: ignore[arg-type]
    except TypeError:
        return repr(value)
