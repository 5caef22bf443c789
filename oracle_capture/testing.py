"""Helpers for replaying a captured SampleSet as pytest parametrised cases.

A capture file is loaded once at collection time and each record becomes one
test case::

    CASES = load_resource_cases("mypkg.tests.data", "parity.csv")

    @pytest.mark.parametrize(("inputs", "expected"), CASES, ids=case_ids(CASES))
    def test_parity_matches_capture(inputs, expected):
        assert matches_capture(parity(*inputs), expected)

Compare with matches_capture rather than ==: it applies the rule the verify
command uses, so an int result matches a recorded 3.0 but 1 never matches
true.
"""

import importlib.resources
from io import StringIO
from pathlib import Path
from typing import TypeAlias

from oracle_capture.codec.domain.scalar_text import encode_fields
from oracle_capture.codec.infrastructure.line_codec import read_sample_set
from oracle_capture.replay.application.replayer import result_matches
from oracle_capture.sampling.domain.record import InputTuple, SampleSet
from oracle_capture.sampling.domain.scalar import Scalar, Signature

Case: TypeAlias = tuple[InputTuple, Scalar]


def load_cases(path: Path, signature: Signature | None = None) -> list[Case]:
    """Read a capture file from disk and return (inputs, expected) pairs."""
    with open(path, encoding="utf-8") as fh:
        return _as_cases(read_sample_set(stream=fh, signature=signature))


def load_resource_cases(
    package: str, name: str, signature: Signature | None = None
) -> list[Case]:
    """Read a capture file shipped inside package and return its cases."""
    text = importlib.resources.files(package).joinpath(name).read_text(encoding="utf-8")
    return _as_cases(read_sample_set(stream=StringIO(text), signature=signature))


def case_ids(cases: list[Case]) -> list[str]:
    """Readable pytest ids: the encoded input fields of each case."""
    return [encode_fields(inputs) for inputs, _ in cases]


def matches_capture(actual: object, expected: Scalar) -> bool:
    """Return True if actual reproduces the recorded output expected."""
    return result_matches(value=actual, expected=expected)


def _as_cases(sample_set: SampleSet) -> list[Case]:
    return [(record.inputs, record.output) for record in sample_set.records]
