"""
Метрики качества кластеризации.

Функции работают и с элементами KMeansElement (через square_distance),
и с массивами NumPy формы (N, D).
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np


def inertia(
    elements: Sequence[Any] | np.ndarray,
    centroids: Sequence[Any] | np.ndarray,
    assignments: Sequence[int] | np.ndarray,
) -> float:
    """
    Сумма квадратов расстояний от элементов до назначенных им центроидов.

    Args:
        elements: Входные элементы или матрица (N, D)
        centroids: Центроиды или матрица (K, D)
        assignments: Индекс центроида для каждого элемента

    Returns:
        Значение инерции (0.0 для пустого входа)

    Raises:
        ValueError: Если длины elements и assignments не совпадают
    """
    if len(elements) != len(assignments):
        raise ValueError(
            f"Got {len(elements)} elements but {len(assignments)} assignments"
        )
    if len(elements) == 0:
        return 0.0

    if isinstance(elements, np.ndarray):
        labels = np.asarray(assignments)
        diff = elements - np.asarray(centroids)[labels]
        return float(np.sum(diff * diff))

    return float(
        sum(
            element.square_distance(centroids[index])
            for element, index in zip(elements, assignments)
        )
    )


def cluster_sizes(assignments: Sequence[int] | np.ndarray, n_clusters: int) -> list[int]:
    """
    Количество элементов в каждом кластере.

    Raises:
        ValueError: Если встречается индекс вне [0, n_clusters)
    """
    labels = np.asarray(assignments, dtype=np.int64)
    if labels.size and (labels.min() < 0 or labels.max() >= n_clusters):
        raise ValueError(f"Assignments must lie in [0, {n_clusters})")
    return np.bincount(labels, minlength=n_clusters).tolist()
