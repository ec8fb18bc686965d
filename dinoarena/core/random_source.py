"""Injectable random sources for stat derivation and combat.

Every random draw in the arena goes through an explicitly passed source with a
single ``next()`` method, so battles are reproducible under a seed and two
concurrent battles never share generator state.
"""
from typing import Optional, Protocol, Sequence, TypeVar, Union, runtime_checkable

import numpy as np

T = TypeVar("T")


@runtime_checkable
class RandomSource(Protocol):
    """Uniform random number source."""

    def next(self) -> float:
        """Return a float uniformly distributed in [0, 1)."""
        ...


class NumpyRandomSource:
    """Production random source backed by a numpy Generator."""

    def __init__(self, seed: Optional[Union[int, np.random.Generator]] = None):
        """Initialize the random source.

        Args:
            seed: Integer seed for reproducible runs, an existing Generator
                to wrap, or None for fresh OS entropy
        """
        if isinstance(seed, np.random.Generator):
            self._generator = seed
        else:
            self._generator = np.random.default_rng(seed)

    @property
    def generator(self) -> np.random.Generator:
        return self._generator

    def next(self) -> float:
        return float(self._generator.random())

    def spawn(self) -> "NumpyRandomSource":
        """Create an independent child source for a parallel battle."""
        return NumpyRandomSource(self._generator.spawn(1)[0])


def uniform(rng: RandomSource, low: float, high: float) -> float:
    """Draw a float uniformly from [low, high)."""
    return low + rng.next() * (high - low)


def pick(rng: RandomSource, options: Sequence[T]) -> T:
    """Pick one element of a non-empty sequence uniformly."""
    if not options:
        raise ValueError("Cannot pick from an empty sequence")
    index = min(int(rng.next() * len(options)), len(options) - 1)
    return options[index]
