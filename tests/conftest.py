"""
Общие фикстуры для всех тестов.
"""

import numpy as np
import pytest

from lloyd_kmeans.core.element import Scalar, as_vectors


@pytest.fixture
def small_dataset():
    """Фикстура с небольшим тестовым датасетом (2D, 2 кластера)."""
    rng = np.random.default_rng(42)
    # Два явно разделённых кластера
    cluster1 = rng.standard_normal((30, 2)) + [0, 0]
    cluster2 = rng.standard_normal((30, 2)) + [20, 20]
    return np.vstack([cluster1, cluster2])


@pytest.fixture
def medium_dataset():
    """Фикстура со средним тестовым датасетом (10D, 3 кластера)."""
    rng = np.random.default_rng(42)
    cluster1 = rng.standard_normal((50, 10)) + [0] * 10
    cluster2 = rng.standard_normal((50, 10)) + [5] * 10
    cluster3 = rng.standard_normal((50, 10)) + [-5] * 10
    return np.vstack([cluster1, cluster2, cluster3])


@pytest.fixture
def simple_2d_dataset():
    """Фикстура с очень простым 2D датасетом для базовых тестов."""
    X = np.array([
        [0.0, 0.0],
        [1.0, 1.0],
        [2.0, 2.0],
        [10.0, 10.0],
        [11.0, 11.0],
        [12.0, 12.0],
    ])
    centroids = np.array([
        [0.5, 0.5],
        [11.0, 11.0],
    ])
    return X, centroids


@pytest.fixture
def scalars_1d():
    """Одномерный пример: {0, 0, 0, 10, 10, 11}."""
    return [Scalar(v) for v in (0.0, 0.0, 0.0, 10.0, 10.0, 11.0)]


@pytest.fixture
def small_vectors(small_dataset):
    """small_dataset в виде списка Vector."""
    return as_vectors(small_dataset)
