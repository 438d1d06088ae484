"""Injectable random sources for flock construction."""

from typing import Optional, Protocol

import numpy as np


class RandomSource(Protocol):
    """Anything that can hand out uniform samples in [0, 1)."""

    def random(self, size) -> np.ndarray:
        ...


class NumpyRandomSource:
    """
    `numpy.random.Generator` backed source.

    The same seed always reproduces the same flock; `seed=None` draws fresh
    OS entropy.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def random(self, size) -> np.ndarray:
        return self._rng.random(size)


class SequenceRandomSource:
    """
    Replays a fixed list of samples, cycling when exhausted.

    Handy in tests that need hand-picked initial states.
    """

    def __init__(self, values):
        self._values = np.asarray(values, dtype=np.float64).ravel()
        if self._values.size == 0:
            raise ValueError("SequenceRandomSource needs at least one value")
        self._cursor = 0

    def random(self, size) -> np.ndarray:
        n = int(np.prod(size))
        idx = (self._cursor + np.arange(n)) % self._values.size
        self._cursor = (self._cursor + n) % self._values.size
        return self._values[idx].reshape(size)
