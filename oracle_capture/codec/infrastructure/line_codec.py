"""Line codec — one SampleRecord per line, inputs first, output last.

    1,2,3,true
    0,0,0,true

Fields are comma separated, lines are newline terminated, there is no header.
"""

from io import StringIO
from typing import TextIO

from oracle_capture.codec.domain.scalar_text import (
    FIELD_DELIMITER,
    decode_scalar,
    encode_fields,
    infer_scalar_type,
)
from oracle_capture.codec.infrastructure.errors import ParseError
from oracle_capture.sampling.domain.record import SampleRecord, SampleSet
from oracle_capture.sampling.domain.scalar import Scalar, ScalarType, Signature


def encode_record(record: SampleRecord) -> str:
    """Render a record as a single line without the trailing newline."""
    return encode_fields((*record.inputs, record.output))


def write_sample_set(sample_set: SampleSet, stream: TextIO) -> int:
    """Write every record of sample_set to stream. Returns the number written."""
    for record in sample_set.records:
        stream.write(encode_record(record))
        stream.write("\n")
    return len(sample_set.records)


def serialize(sample_set: SampleSet) -> str:
    buffer = StringIO()
    write_sample_set(sample_set=sample_set, stream=buffer)
    return buffer.getvalue()


def read_sample_set(stream: TextIO, signature: Signature | None = None) -> SampleSet:
    """
    Parse every line of stream into a SampleSet.

    With a signature each line must carry arity + 1 fields of the declared
    types. Without one, each field's type is recognised from its text and every
    line must have as many fields as the first.

    Raises:
        ParseError: on the first malformed line, citing its 1-based number.
    """
    records: list[SampleRecord] = []
    expected_fields = signature.arity + 1 if signature is not None else None
    types = (
        (*signature.parameters, signature.output) if signature is not None else None
    )

    for line_number, raw in enumerate(stream, start=1):
        line = raw.rstrip("\r\n")
        fields = line.split(FIELD_DELIMITER) if line else []

        if not fields:
            raise ParseError(line_number=line_number, line=line, reason="empty line")
        if expected_fields is None:
            expected_fields = len(fields)
        if len(fields) != expected_fields:
            raise ParseError(
                line_number=line_number,
                line=line,
                reason=f"expected {expected_fields} fields, got {len(fields)}",
            )

        values = _decode_fields(
            fields=fields, types=types, line_number=line_number, line=line
        )
        records.append(SampleRecord(inputs=tuple(values[:-1]), output=values[-1]))

    return SampleSet(records=tuple(records))


def deserialize(text: str, signature: Signature | None = None) -> SampleSet:
    return read_sample_set(stream=StringIO(text), signature=signature)


def _decode_fields(
    fields: list[str],
    types: tuple[ScalarType, ...] | None,
    line_number: int,
    line: str,
) -> list[Scalar]:
    values: list[Scalar] = []
    for position, text in enumerate(fields, start=1):
        try:
            scalar_type = (
                types[position - 1] if types is not None else infer_scalar_type(text)
            )
            values.append(decode_scalar(text=text, scalar_type=scalar_type))
        except ValueError as exc:
            raise ParseError(
                line_number=line_number,
                line=line,
                reason=f"field {position}: {exc}",
            ) from exc
    return values
