# core/elements.py
from __future__ import annotations

import sys
from functools import reduce
from operator import add
from typing import Any, Sequence

import numpy as np

from .base import KMeansBase
from .element import KMeansElement

# Начальное «ближайшее» расстояние: первый центроид всегда его заменит
_NEAREST_START = sys.float_info.max


def nearest_index(element: KMeansElement, centroids: Sequence[KMeansElement]) -> int:
    """Линейный поиск ближайшего центроида; при равенстве остаётся первый."""
    nearest_distance = _NEAREST_START
    min_index = 0

    for index, centroid in enumerate(centroids):
        distance = element.square_distance(centroid)
        if distance < nearest_distance:
            min_index = index
            nearest_distance = distance

    return min_index


class KMeansElements(KMeansBase):
    """
    Однопоточная реализация KMeans для произвольных элементов.

    Элементы должны поддерживать протокол KMeansElement: zero_value(), +,
    деление на int и square_distance. Пустой кластер получает нулевое значение
    типа элементов и не пересевается.
    """

    def __init__(self, *args: Any, zero: KMeansElement | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        # Явный ноль нужен, если тип элементов не реализует zero_value()
        self.zero = zero

    def _zero_for(self, elements: Sequence[KMeansElement]) -> KMeansElement:
        if self.zero is not None:
            return self.zero
        return type(elements[0]).zero_value()

    def empty_centroids(self, elements: Sequence[KMeansElement]) -> tuple:
        return ()

    def take(self, elements: Sequence[KMeansElement], indices: np.ndarray) -> list:
        return [elements[int(i)] for i in indices]

    def nearest_index(self, element: KMeansElement, centroids: Sequence[KMeansElement]) -> int:
        return nearest_index(element, centroids)

    def assign_clusters(
        self, elements: Sequence[KMeansElement], centroids: Sequence[KMeansElement]
    ) -> list[int]:
        return [nearest_index(element, centroids) for element in elements]

    def update_centroids(
        self, elements: Sequence[KMeansElement], labels: Sequence[int]
    ) -> list:
        zero = self._zero_for(elements)
        groups: list[list[KMeansElement]] = [[] for _ in range(self.K)]
        for element, label in zip(elements, labels):
            groups[label].append(element)

        # Кластеры обходятся в фиксированном порядке 0..K-1
        centroids = []
        for members in groups:
            if members:
                centroids.append(reduce(add, members, zero) / len(members))
            else:
                centroids.append(zero)
        return centroids

    def centroid_shift(
        self,
        old_centroids: Sequence[KMeansElement],
        new_centroids: Sequence[KMeansElement],
    ) -> float:
        return float(
            sum(old.square_distance(new) for old, new in zip(old_centroids, new_centroids))
        )
