"""Package initialization for stochastic-universal-sampler.

Weighted selection of many items at once from a single random offset,
giving each item a share of the selections proportional to its weight
without letting any one weight dominate.
"""

from stochastic_universal_sampler.errors import (
    EmptyPopulation,
    InvalidRandomDraw,
    InvalidSampleCount,
    InvalidWeight,
    SamplingError,
    SpacingUnderflow,
    WeightOverflow,
    ZeroTotalWeight,
)
from stochastic_universal_sampler.random_source import (
    PythonRandomSource,
    RandomSource,
    as_random_source,
)
from stochastic_universal_sampler.sampler import (
    cumulative_weights,
    iter_sample,
    sample,
    sample_items,
    select,
)
from stochastic_universal_sampler.stats import ChiSquaredResult, expected_counts
from stochastic_universal_sampler.universal import UniversalSampler

__version__ = "0.1.0"
__all__ = [
    "ChiSquaredResult",
    "EmptyPopulation",
    "InvalidRandomDraw",
    "InvalidSampleCount",
    "InvalidWeight",
    "PythonRandomSource",
    "RandomSource",
    "SamplingError",
    "SpacingUnderflow",
    "UniversalSampler",
    "WeightOverflow",
    "ZeroTotalWeight",
    "as_random_source",
    "cumulative_weights",
    "expected_counts",
    "iter_sample",
    "sample",
    "sample_items",
    "select",
]
