"""Tests for the random source adapters."""

import math
import random

import pytest


class AlmostOneRandom(random.Random):
    """A generator whose random() is always the largest float below 1."""

    def random(self) -> float:
        return math.nextafter(1.0, 0.0)


def test_python_source_draws_in_range() -> None:
    """Draws lie in [0, upper)."""
    from stochastic_universal_sampler import PythonRandomSource

    source = PythonRandomSource(random.Random(0))
    for upper in (1e-300, 0.1, 1.0, 3.0, 1e300):
        for _ in range(100):
            value = source.draw(upper)
            assert 0.0 <= value < upper


def test_python_source_pulls_back_rounded_upper() -> None:
    """A product that rounds up to the bound is moved just below it."""
    from stochastic_universal_sampler import PythonRandomSource

    source = PythonRandomSource(AlmostOneRandom())
    value = source.draw(3.0)
    assert value < 3.0
    assert value == math.nextafter(3.0, 0.0)


def test_python_source_defaults_to_fresh_generator() -> None:
    """No generator means a new unseeded one."""
    from stochastic_universal_sampler import PythonRandomSource

    source = PythonRandomSource()
    assert isinstance(source.generator, random.Random)


def test_none_becomes_python_source() -> None:
    """None is coerced to an unseeded standard library generator."""
    from stochastic_universal_sampler import PythonRandomSource, as_random_source

    assert isinstance(as_random_source(None), PythonRandomSource)


def test_random_instance_is_wrapped() -> None:
    """A random.Random is wrapped, not copied."""
    from stochastic_universal_sampler import PythonRandomSource, as_random_source

    generator = random.Random(3)
    source = as_random_source(generator)
    assert isinstance(source, PythonRandomSource)
    assert source.generator is generator


def test_system_random_is_accepted() -> None:
    """SystemRandom is a random.Random too."""
    from stochastic_universal_sampler import as_random_source

    source = as_random_source(random.SystemRandom())
    assert 0.0 <= source.draw(2.0) < 2.0


def test_integer_seed_is_reproducible() -> None:
    """An integer seeds a private generator."""
    from stochastic_universal_sampler import as_random_source

    assert as_random_source(5).draw(1.0) == as_random_source(5).draw(1.0)


def test_custom_source_is_passed_through() -> None:
    """Objects with a draw method are used as they are."""
    from stochastic_universal_sampler import RandomSource, as_random_source

    class Half:
        def draw(self, upper: float) -> float:
            return upper / 2

    source = Half()
    assert isinstance(source, RandomSource)
    assert as_random_source(source) is source


@pytest.mark.parametrize("bad", ["seed", 1.5, True, object()])
def test_unsupported_sources_rejected(bad: object) -> None:
    """Anything else is a type error."""
    from stochastic_universal_sampler import as_random_source

    with pytest.raises(TypeError):
        as_random_source(bad)
