"""A reusable sampler object over a fixed set of weights."""

from collections.abc import Iterable, Iterator, Sequence
from typing import TypeVar

from stochastic_universal_sampler.random_source import as_random_source
from stochastic_universal_sampler.sampler import (
    cumulative_weights,
    iter_sample,
    sample,
)
from stochastic_universal_sampler.stats import ChiSquaredResult, test_distribution

T = TypeVar("T")


class UniversalSampler:
    """Stochastic universal sampling over a fixed list of weights.

    The weights are validated once on construction. Each call to
    :meth:`sample` still rebuilds the cumulative weights and draws a single
    offset from the sampler's random source, so calls are independent of
    one another apart from advancing that source.

    Args:
        weights: Non-negative finite weights with a positive total.
        seed: Seed for a private :class:`random.Random`.
        rng: A random source to use instead; cannot be combined with ``seed``.
    """

    def __init__(
        self,
        weights: Iterable[float],
        *,
        seed: int | None = None,
        rng: object = None,
    ) -> None:
        if seed is not None and rng is not None:
            raise TypeError("pass either seed or rng, not both")
        raw = list(weights)
        self._total = cumulative_weights(raw)[-1]
        self._weights = tuple(float(w) for w in raw)
        self._source = as_random_source(rng if rng is not None else seed)

    def __len__(self) -> int:
        return len(self._weights)

    def __repr__(self) -> str:
        return f"UniversalSampler({list(self._weights)!r})"

    @property
    def weights(self) -> tuple[float, ...]:
        return self._weights

    @property
    def total_weight(self) -> float:
        return self._total

    def weight(self, index: int) -> float:
        """Weight at ``index``; negative indices count from the end."""
        return self._weights[index]

    def sample(self, n: int, *, shuffle: bool = False) -> list[int]:
        """Select ``n`` indices."""
        return sample(self._weights, n, self._source, shuffle=shuffle)

    def iter_sample(self, n: int) -> Iterator[int]:
        return iter_sample(self._weights, n, self._source)

    def sample_items(
        self, items: Sequence[T], n: int, *, shuffle: bool = False
    ) -> list[T]:
        """Select ``n`` of ``items``, which line up positionally with the weights."""
        if len(items) != len(self._weights):
            raise ValueError(
                f"expected {len(self._weights)} items to match the weights, "
                f"got {len(items)}"
            )
        return [items[i] for i in self.sample(n, shuffle=shuffle)]

    def test_distribution(self, n: int, trials: int = 1000) -> ChiSquaredResult:
        """Chi-squared test of ``trials`` samples of size ``n`` against the weights."""
        return test_distribution(self._weights, n, trials, self._source)
