from __future__ import annotations

import numpy as np

from lloyd_kmeans.config import SeedLike


def make_rng(seed: SeedLike = None) -> np.random.Generator:
    """Генератор случайных чисел: готовый Generator возвращается как есть."""
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def sample_indices(n: int, count: int, rng: np.random.Generator) -> np.ndarray:
    """
    count независимых равномерных индексов из [0, n) с возвращением.

    Последний элемент входа тоже может стать начальным центроидом.
    """
    if n <= 0:
        raise ValueError("Cannot sample from an empty sequence")
    return rng.integers(0, n, size=count)
