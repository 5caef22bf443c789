"""InputGenerator Protocol — structural interface for drawing input tuples."""

from collections.abc import Callable
from typing import Protocol, TypeAlias

from oracle_capture.sampling.domain.record import InputTuple
from oracle_capture.sampling.domain.scalar import ScalarType


class InputGenerator(Protocol):
    """Draws one input tuple per call, biased in magnitude by size."""

    def draw(self, parameters: tuple[ScalarType, ...], size: int) -> InputTuple: ...


GeneratorFactory: TypeAlias = Callable[[int], InputGenerator]
