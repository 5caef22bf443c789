"""Locale-independent text encoding for scalar values.

Encodings:

    int    signed decimal, no leading '+'         -12
    bool   lowercase literal                      true / false
    float  Python's shortest round-trip repr      0.1, -2.5e-07, inf, -inf, nan

A float always carries a '.', an exponent or one of the non-finite names, so
the three grammars never overlap and a field's type can be recognised from
its text alone.
"""

import re

from oracle_capture.sampling.domain.scalar import Scalar, ScalarType

FIELD_DELIMITER = ","

_INT_PATTERN = re.compile(r"-?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"-?(?:[0-9]+\.[0-9]+(?:e[+-][0-9]+)?|[0-9]+e[+-][0-9]+|inf)|nan"
)
_BOOL_LITERALS = {"true": True, "false": False}


def encode_scalar(value: Scalar) -> str:
    """Render a scalar in its canonical text form.

    Raises:
        TypeError: if value is not an int, bool or float.
    """
    if type(value) is bool:
        return "true" if value else "false"
    if type(value) is int:
        return str(value)
    if type(value) is float:
        return repr(value)
    raise TypeError(f"cannot encode {type(value).__name__} value {value!r}")


def decode_scalar(text: str, scalar_type: ScalarType) -> Scalar:
    """Parse text written by encode_scalar back into a scalar of scalar_type.

    Raises:
        ValueError: if text is not the canonical form of a scalar_type value.
    """
    match scalar_type:
        case ScalarType.BOOL:
            if text in _BOOL_LITERALS:
                return _BOOL_LITERALS[text]
        case ScalarType.INT:
            if _INT_PATTERN.fullmatch(text):
                return int(text)
        case ScalarType.FLOAT:
            if _FLOAT_PATTERN.fullmatch(text):
                return float(text)
    raise ValueError(f"not a valid {scalar_type.value}: {text!r}")


def infer_scalar_type(text: str) -> ScalarType:
    """Recognise which scalar type text encodes.

    Raises:
        ValueError: if text matches none of the scalar grammars.
    """
    if text in _BOOL_LITERALS:
        return ScalarType.BOOL
    if _INT_PATTERN.fullmatch(text):
        return ScalarType.INT
    if _FLOAT_PATTERN.fullmatch(text):
        return ScalarType.FLOAT
    raise ValueError(f"not a valid scalar: {text!r}")


def encode_fields(values: tuple[Scalar, ...]) -> str:
    """Join the encoded form of each value with the field delimiter."""
    return FIELD_DELIMITER.join(encode_scalar(value) for value in values)
