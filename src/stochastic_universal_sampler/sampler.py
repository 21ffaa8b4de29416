"""Stochastic Universal Sampling.

Selects ``n`` indices from a sequence of non-negative weights so that
index ``i`` is expected to appear ``n * weights[i] / W`` times, where ``W``
is the total weight. Unlike ``n`` independent weighted draws, a single
uniform offset ``r`` in ``[0, W / n)`` positions ``n`` evenly spaced
pointers ``r + k * W / n`` over the cumulative weights, and each pointer
selects the first index whose cumulative weight is strictly greater than
it. Every index is therefore selected either ``floor`` or ``ceil`` of its
expected count, so a heavy weight cannot crowd out the rest.

Only one value is ever drawn from the random source per call (unless the
caller asks for the result to be shuffled).
"""

import bisect
import logging
import math
import numbers
from collections.abc import Iterable, Iterator
from typing import TypeVar

from stochastic_universal_sampler.errors import (
    EmptyPopulation,
    InvalidRandomDraw,
    InvalidSampleCount,
    InvalidWeight,
    SpacingUnderflow,
    WeightOverflow,
    ZeroTotalWeight,
)
from stochastic_universal_sampler.random_source import RandomSource, as_random_source

logger = logging.getLogger(__name__)

T = TypeVar("T")


def cumulative_weights(weights: Iterable[float]) -> list[float]:
    """Return the running sums of ``weights`` after validating them.

    Raises :class:`EmptyPopulation`, :class:`InvalidWeight` (also for
    values that are not real numbers), :class:`ZeroTotalWeight` or
    :class:`WeightOverflow`.
    """
    cumulative: list[float] = []
    total = 0.0
    for index, raw in enumerate(weights):
        if isinstance(raw, bool) or not isinstance(raw, numbers.Real):
            raise InvalidWeight(index, raw)
        try:
            weight = float(raw)
        except OverflowError:
            raise InvalidWeight(index, raw) from None
        if not (math.isfinite(weight) and weight >= 0.0):
            raise InvalidWeight(index, weight)
        total += weight
        cumulative.append(total)

    if not cumulative:
        raise EmptyPopulation()
    if total == 0.0:
        raise ZeroTotalWeight()
    if math.isinf(total):
        raise WeightOverflow()
    return cumulative


def _check_count(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 1:
        raise InvalidSampleCount(n)
    try:
        float(n)
    except OverflowError:
        raise InvalidSampleCount(n) from None
    return int(n)


def _spacing(total: float, n: int) -> float:
    spacing = total / n
    if spacing == 0.0:
        raise SpacingUnderflow(total, n)
    return spacing


def _draw(source: RandomSource, upper: float) -> float:
    value = source.draw(upper)
    if not 0.0 <= value < upper:
        raise InvalidRandomDraw(value, upper)
    return value


def _walk(
    cumulative: list[float], n: int, spacing: float, offset: float
) -> Iterator[int]:
    # The first index holding the full total has positive weight; a pointer
    # rounded up to W must stop there rather than on a trailing zero.
    last = bisect.bisect_left(cumulative, cumulative[-1])
    cursor = 0
    for k in range(n):
        pointer = offset + k * spacing
        while cursor < last and cumulative[cursor] <= pointer:
            cursor += 1
        yield cursor


def select(weights: Iterable[float], n: int, offset: float) -> list[int]:
    """Run the pointer walk for an explicit offset in ``[0, W / n)``.

    This is the whole algorithm minus the random draw, so the result is
    fully determined by its arguments.
    """
    cumulative = cumulative_weights(weights)
    n = _check_count(n)
    spacing = _spacing(cumulative[-1], n)
    if not 0.0 <= offset < spacing:
        raise InvalidRandomDraw(offset, spacing)
    return list(_walk(cumulative, n, spacing, offset))


def iter_sample(
    weights: Iterable[float], n: int, rng: object = None
) -> Iterator[int]:
    """Lazily yield ``n`` indices selected by stochastic universal sampling.

    Validation and the random draw happen immediately; only the pointer
    walk is deferred to iteration. Indices come out in ascending order.
    """
    cumulative = cumulative_weights(weights)
    n = _check_count(n)
    source = as_random_source(rng)

    spacing = _spacing(cumulative[-1], n)
    offset = _draw(source, spacing)
    logger.debug(
        "sampling %d of %d weights (total=%g, spacing=%g, offset=%g)",
        n,
        len(cumulative),
        cumulative[-1],
        spacing,
        offset,
    )
    return _walk(cumulative, n, spacing, offset)


def sample(
    weights: Iterable[float], n: int, rng: object = None, *, shuffle: bool = False
) -> list[int]:
    """Select ``n`` indices into ``weights`` by stochastic universal sampling.

    Args:
        weights: Non-negative finite weights, one per population member.
        n: Number of selections to make. Must be a positive integer.
        rng: A :class:`RandomSource`, :class:`random.Random`, integer seed,
            or ``None`` for a fresh generator.
        shuffle: Shuffle the selection instead of returning it in ascending
            order. This draws ``n - 1`` further values from ``rng``.

    Returns:
        A list of exactly ``n`` indices, possibly with repeats.
    """
    source = as_random_source(rng)
    selection = list(iter_sample(weights, n, source))
    if shuffle:
        _shuffle(selection, source)
    return selection


def _shuffle(values: list[int], source: RandomSource) -> None:
    for i in range(len(values) - 1, 0, -1):
        j = int(_draw(source, i + 1))
        values[i], values[j] = values[j], values[i]


def sample_items(
    population: Iterable[tuple[T, float]],
    n: int,
    rng: object = None,
    *,
    shuffle: bool = False,
) -> list[T]:
    """Like :func:`sample`, but over ``(item, weight)`` pairs, returning items."""
    items: list[T] = []
    weights: list[float] = []
    for item, weight in population:
        items.append(item)
        weights.append(weight)
    return [items[i] for i in sample(weights, n, rng, shuffle=shuffle)]
