"""Chi-squared conformance checks for the sampler."""

import logging
import math
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from scipy.stats import chisquare

from stochastic_universal_sampler.random_source import as_random_source
from stochastic_universal_sampler.sampler import cumulative_weights, iter_sample

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChiSquaredResult:
    """Outcome of a goodness-of-fit test of observed selection counts."""

    chi_squared: float
    degrees_of_freedom: int
    p_value: float

    def passes(self, alpha: float = 0.05) -> bool:
        """Whether the counts are consistent with the weights at level ``alpha``."""
        return self.p_value > alpha


def expected_counts(weights: Iterable[float], total_draws: int) -> list[float]:
    """Expected number of selections of each index over ``total_draws``."""
    raw = list(weights)
    total = cumulative_weights(raw)[-1]
    values = [float(w) for w in raw]
    return [total_draws * w / total for w in values]


def test_distribution(
    weights: Iterable[float], n: int, trials: int = 1000, rng: object = None
) -> ChiSquaredResult:
    """Sample ``trials`` times and test the pooled counts against the weights.

    Zero weights are left out of the test itself; if any of them was ever
    selected the result fails outright.
    """
    raw = list(weights)
    cumulative_weights(raw)
    values = [float(w) for w in raw]
    if trials < 1:
        raise ValueError(f"trials must be positive, got {trials!r}")
    source = as_random_source(rng)

    counts: Counter[int] = Counter()
    for _ in range(trials):
        counts.update(iter_sample(values, n, source))

    positive = [i for i, w in enumerate(values) if w > 0.0]
    dof = max(len(positive) - 1, 0)
    if any(counts[i] for i, w in enumerate(values) if w == 0.0):
        return ChiSquaredResult(math.inf, dof, 0.0)
    if len(positive) < 2:
        return ChiSquaredResult(0.0, dof, 1.0)

    observed = [counts[i] for i in positive]
    expected = expected_counts([values[i] for i in positive], sum(observed))
    statistic, p_value = chisquare(observed, expected)
    result = ChiSquaredResult(float(statistic), dof, float(p_value))
    logger.debug("chi-squared over %d trials of %d: %s", trials, n, result)
    return result
