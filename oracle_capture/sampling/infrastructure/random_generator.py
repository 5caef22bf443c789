"""RandomInputGenerator — seeded random draws sized like a property-test generator."""

import random
import secrets

from oracle_capture.sampling.domain.record import InputTuple
from oracle_capture.sampling.domain.scalar import Scalar, ScalarType

_SEED_BITS = 32


def fresh_seed() -> int:
    """Choose a new seed from the OS entropy source."""
    return secrets.randbits(_SEED_BITS)


class RandomInputGenerator:
    """Draws scalars from a private random.Random seeded once at construction.

    For size s: ints are uniform in [-s, s], floats uniform in [-s, s], bools a
    fair coin. Parameters are drawn in declared order, so equal seeds give
    equal sequences of tuples.

    Satisfies the InputGenerator protocol structurally.
    """

    def __init__(self, seed: int) -> None:
        self._rng = random.Random(seed)

    def draw(self, parameters: tuple[ScalarType, ...], size: int) -> InputTuple:
        return tuple(self._draw_one(scalar_type=p, size=size) for p in parameters)

    def _draw_one(self, scalar_type: ScalarType, size: int) -> Scalar:
        match scalar_type:
            case ScalarType.INT:
                return self._rng.randint(-size, size)
            case ScalarType.BOOL:
                return self._rng.random() < 0.5
            case ScalarType.FLOAT:
                return self._rng.uniform(-size, size)
