"""Scalar types and function signatures — the value vocabulary of a sample."""

from enum import StrEnum
from typing import TypeAlias

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt

Scalar: TypeAlias = StrictBool | StrictInt | StrictFloat


class ScalarType(StrEnum):
    """The scalar types a reference function may accept or return."""

    INT = "int"
    BOOL = "bool"
    FLOAT = "float"

    @classmethod
    def from_python(cls, annotation: object) -> "ScalarType | None":
        """Map a Python type annotation to a ScalarType, or None if unsupported.

        String annotations ("int") are accepted for modules that defer them.
        """
        if isinstance(annotation, str):
            try:
                return cls(annotation)
            except ValueError:
                return None
        return _PYTHON_TYPES.get(annotation)

    @classmethod
    def of(cls, value: Scalar) -> "ScalarType":
        return _PYTHON_TYPES[type(value)]

    def accepts(self, value: object) -> bool:
        """Return True if value is exactly of this scalar type (bool is not an int)."""
        match self:
            case ScalarType.BOOL:
                return type(value) is bool
            case ScalarType.INT:
                return type(value) is int
            case ScalarType.FLOAT:
                return type(value) is float


_PYTHON_TYPES: dict[object, ScalarType] = {
    int: ScalarType.INT,
    bool: ScalarType.BOOL,
    float: ScalarType.FLOAT,
}


class Signature(BaseModel, frozen=True):
    """Ordered parameter types and the output type of a reference function."""

    parameters: tuple[ScalarType, ...] = Field(default=())
    output: ScalarType

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def describe(self) -> str:
        params = ", ".join(p.value for p in self.parameters)
        return f"({params}) -> {self.output.value}"


def conform_output(value: object, expected: ScalarType) -> Scalar:
    """
    Return value as a Scalar of the expected type.

    A float output accepts a non-bool int and widens it; every other mismatch
    raises TypeError. float() raises OverflowError for an int too large to widen.
    """
    if expected.accepts(value):
        return value  # type: ignore[return-value]
    if expected is ScalarType.FLOAT and type(value) is int:
        return float(value)
    raise TypeError(
        f"expected {expected.value} output, got {type(value).__name__} {value!r}"
    )
