"""The randomness capability the sampler draws from.

The sampler only ever needs "one uniform value in ``[0, upper)``", so that
is the whole interface. Anything with a matching ``draw`` method can be
passed in, and :class:`random.Random` instances (seeded, system, or the
ones Hypothesis hands out) are adapted automatically.
"""

import math
import random
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Something that can draw a uniform float from ``[0, upper)``."""

    def draw(self, upper: float) -> float: ...


class PythonRandomSource:
    """Adapts a :class:`random.Random` to :class:`RandomSource`."""

    def __init__(self, generator: random.Random | None = None) -> None:
        self.generator = generator if generator is not None else random.Random()

    def draw(self, upper: float) -> float:
        value = self.generator.random() * upper
        # random() < 1.0, but the product can still round up to upper.
        if value >= upper:
            value = math.nextafter(upper, 0.0)
        return value

    def __repr__(self) -> str:
        return f"PythonRandomSource({self.generator!r})"


def as_random_source(rng: object = None) -> RandomSource:
    """Coerce ``rng`` into a :class:`RandomSource`.

    Accepts ``None`` (a fresh unseeded generator), an ``int`` seed, a
    :class:`random.Random`, or an object that already has ``draw``.
    """
    if rng is None:
        return PythonRandomSource()
    if isinstance(rng, random.Random):
        return PythonRandomSource(rng)
    if isinstance(rng, int) and not isinstance(rng, bool):
        return PythonRandomSource(random.Random(rng))
    if isinstance(rng, RandomSource):
        return rng
    raise TypeError(
        f"expected a RandomSource, random.Random, int seed or None, got {rng!r}"
    )
