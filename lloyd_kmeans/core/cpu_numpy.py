# core/cpu_numpy.py
from __future__ import annotations

from typing import Sequence

import numpy as np

from lloyd_kmeans.exceptions import InvalidParameterError

from .base import KMeansBase


class KMeansCPUNumpy(KMeansBase):
    """
    Векторизованная реализация KMeans на NumPy для матриц (N, D).

    Поведение совпадает с KMeansElements: те же случайные индексы при том же
    seed, argmin выбирает наименьший индекс при равенстве, пустой кластер
    получает нулевой вектор.
    """

    def fit(self, X, assignments=None):
        X = np.asarray(X, dtype=np.float64)
        # Одномерный вход: N точек с одним признаком
        if X.ndim == 1:
            X = X.reshape(-1, 1)
        if X.ndim != 2:
            raise InvalidParameterError(f"Expected a 2-D array (N, D), got shape {X.shape}")
        return super().fit(X, assignments)

    def new_assignments(self, n: int) -> np.ndarray:
        return np.zeros(n, dtype=np.int64)

    def freeze_centroids(self, centroids: np.ndarray) -> np.ndarray:
        centroids = centroids.copy()
        centroids.flags.writeable = False
        return centroids

    def empty_centroids(self, X: np.ndarray) -> np.ndarray:
        return self.freeze_centroids(np.empty((0, X.shape[1]), dtype=np.float64))

    def take(self, X: np.ndarray, indices: np.ndarray) -> np.ndarray:
        return X[indices].copy()

    def nearest_index(self, element: np.ndarray, centroids: np.ndarray) -> int:
        point = np.atleast_1d(np.asarray(element, dtype=np.float64))
        diff = centroids - point[None, :]
        return int(np.argmin(np.sum(diff * diff, axis=1)))

    def assign_clusters(self, X: np.ndarray, centroids: np.ndarray) -> np.ndarray:
        X = np.asarray(X, dtype=np.float64)
        if X.ndim == 1:
            X = X.reshape(-1, 1)
        # (N, K, D) → (N, K)
        diff = X[:, None, :] - centroids[None, :, :]
        distances = np.sum(diff * diff, axis=2)
        return np.argmin(distances, axis=1)

    def update_centroids(self, X: np.ndarray, labels: Sequence[int]) -> np.ndarray:
        D = X.shape[1]
        centroids = np.zeros((self.K, D), dtype=np.float64)
        labels = np.asarray(labels)

        for k in range(self.K):
            points = X[labels == k]
            if len(points) > 0:
                centroids[k] = points.sum(axis=0) / len(points)

        return centroids

    def centroid_shift(self, old_centroids: np.ndarray, new_centroids: np.ndarray) -> float:
        diff = new_centroids - old_centroids
        return float(np.sum(diff * diff))
