from __future__ import annotations

from typing import Any, MutableSequence, Optional, Sequence

import numpy as np

from lloyd_kmeans.config import DEFAULT_MAX_ITERATION, SeedLike

from .base import FittedKMeans
from .cpu_numpy import KMeansCPUNumpy
from .elements import KMeansElements


def cluster(
    elements: Sequence[Any] | np.ndarray,
    n_clusters: int,
    max_iteration: int = DEFAULT_MAX_ITERATION,
    converge_distance: Optional[float] = None,
    assignments: MutableSequence[int] | None = None,
    seed: SeedLike = None,
    logger: Any | None = None,
) -> FittedKMeans:
    """
    Создать модель и сразу обучить её за один вызов.

    Матрицу NumPy обрабатывает KMeansCPUNumpy, любую другую
    последовательность обрабатывает KMeansElements.
    """
    model_cls = KMeansCPUNumpy if isinstance(elements, np.ndarray) else KMeansElements
    model = model_cls(
        n_clusters=n_clusters,
        max_iteration=max_iteration,
        converge_distance=converge_distance,
        seed=seed,
        logger=logger,
    )
    return model.fit(elements, assignments)
