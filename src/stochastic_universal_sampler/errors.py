"""Exceptions raised for invalid sampling input.

Every error here is a caller error detected before any randomness is
consumed. They all derive from ``ValueError`` so code that only cares
about "bad input" can catch that.
"""


class SamplingError(ValueError):
    """Base class for all errors raised by the sampler."""


class EmptyPopulation(SamplingError):
    """Raised when there are no weights to sample from."""

    def __init__(self) -> None:
        super().__init__("cannot sample from an empty population")


class InvalidWeight(SamplingError):
    """Raised when a weight is negative, NaN or infinite."""

    def __init__(self, index: int, weight: object) -> None:
        self.index = index
        self.weight = weight
        super().__init__(
            f"weight at index {index} must be a finite non-negative number, got {weight!r}"
        )


class ZeroTotalWeight(SamplingError):
    """Raised when every weight is zero."""

    def __init__(self) -> None:
        super().__init__("total weight must be positive, but every weight is zero")


class WeightOverflow(SamplingError):
    """Raised when finite weights sum to infinity."""

    def __init__(self) -> None:
        super().__init__("sum of weights overflows to infinity")


class InvalidSampleCount(SamplingError):
    """Raised when the number of selections is not a positive integer."""

    def __init__(self, count: object) -> None:
        self.count = count
        super().__init__(f"sample count must be a positive integer, got {count!r}")


class InvalidRandomDraw(SamplingError):
    """Raised when a random source returns a value outside ``[0, upper)``."""

    def __init__(self, value: float, upper: float) -> None:
        self.value = value
        self.upper = upper
        super().__init__(f"random source returned {value!r}, expected [0, {upper!r})")


class SpacingUnderflow(SamplingError):
    """Raised when the total weight is too small to split into ``n`` pointers."""

    def __init__(self, total: float, count: int) -> None:
        self.total = total
        self.count = count
        super().__init__(
            f"total weight {total!r} is too small to space {count} pointers apart"
        )
