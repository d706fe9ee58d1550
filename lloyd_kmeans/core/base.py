from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, MutableSequence, Optional, Sequence

import numpy as np

from lloyd_kmeans.config import DEFAULT_MAX_ITERATION, KMeansConfig, SeedLike
from lloyd_kmeans.core.sampling import make_rng, sample_indices
from lloyd_kmeans.exceptions import AssignmentBufferError, EmptyModelError
from lloyd_kmeans.metrics.timers import FitTimings, Timer


@dataclass(frozen=True)
class FittedKMeans:
    """
    Результат fit(...): центроиды, назначения и статистика запуска.

    Существует только после успешного обучения, поэтому центроиды здесь
    всегда заполнены (пустые лишь для пустого входа).
    """

    centroids: Sequence[Any]
    assignments: MutableSequence[int]
    n_iters_actual: int
    converged: bool
    timings: FitTimings
    model: KMeansBase = field(repr=False, compare=False)

    @property
    def n_clusters(self) -> int:
        return self.model.K

    def find_index(self, element: Any) -> int:
        """Индекс ближайшего центроида (при равенстве наименьший)."""
        if len(self.centroids) == 0:
            raise EmptyModelError("Model was fitted on empty input and has no centroids")
        return self.model.nearest_index(element, self.centroids)

    def find_centroid(self, element: Any) -> Any:
        """Ближайший к element центроид."""
        return self.centroids[self.find_index(element)]

    def predict(self, elements: Sequence[Any]) -> list[int]:
        """Индексы ближайших центроидов для новых элементов."""
        if len(elements) == 0:
            return []
        if len(self.centroids) == 0:
            raise EmptyModelError("Model was fitted on empty input and has no centroids")
        return [int(i) for i in self.model.assign_clusters(elements, self.centroids)]


class KMeansBase(ABC):
    """
    Базовый класс для реализаций KMeans (алгоритм Ллойда).

    Отвечает за инициализацию центроидов, цикл итераций, проверку сходимости
    и сбор таймингов:
    - T_назначения: время шага assign_clusters;
    - T_обновления: время шага update_centroids;
    - T_итерации: сумма двух предыдущих.
    """

    def __init__(
        self,
        n_clusters: int,
        max_iteration: int = DEFAULT_MAX_ITERATION,
        converge_distance: Optional[float] = None,
        seed: SeedLike = None,
        logger: Any | None = None,
    ):
        self.config = KMeansConfig(
            n_clusters=n_clusters,
            max_iteration=max_iteration,
            converge_distance=converge_distance,
            seed=seed,
        )
        self.K = self.config.n_clusters
        self.max_iteration = self.config.max_iteration
        self.converge_distance = converge_distance
        self.rng = make_rng(self.config.seed)
        self.logger = logger

    @classmethod
    def from_config(cls, config: KMeansConfig, logger: Any | None = None) -> KMeansBase:
        return cls(
            n_clusters=config.n_clusters,
            max_iteration=config.max_iteration,
            converge_distance=config.converge_distance,
            seed=config.seed,
            logger=logger,
        )

    def fit(
        self,
        elements: Sequence[Any],
        assignments: MutableSequence[int] | None = None,
    ) -> FittedKMeans:
        """
        Основной цикл KMeans с остановкой по сходимости.

        Алгоритм останавливается, когда:
        - суммарный квадрат сдвига центроидов <= converge_distance ** 2, ИЛИ
        - выполнено max_iteration итераций.

        assignments: необязательный буфер вызывающего кода длины len(elements),
        заполняется на месте; без него создаётся новый. После цикла выполняется
        финальное назначение, поэтому назначения всегда соответствуют
        возвращённым центроидам.
        """
        n = len(elements)
        buffer = self._prepare_assignments(n, assignments)
        timings = FitTimings()

        if n == 0:
            if self.logger:
                self.logger.info("  Empty input, nothing to cluster")
            return FittedKMeans(
                centroids=self.empty_centroids(elements),
                assignments=buffer,
                n_iters_actual=0,
                converged=False,
                timings=timings,
                model=self,
            )

        centroids = self.init_centroids(elements)
        threshold = self.config.converge_square_distance
        converged = False

        for i in range(self.max_iteration):
            with Timer() as t_assign:
                labels = self.assign_clusters(elements, centroids)
                self._write_assignments(buffer, labels)
            with Timer() as t_update:
                new_centroids = self.update_centroids(elements, labels)

            t_iter_elapsed = timings.add(t_assign.elapsed, t_update.elapsed)

            # Сдвиг считается попарно по индексу, а не по ближайшему центроиду
            shift = self.centroid_shift(centroids, new_centroids)
            converged = threshold is not None and shift <= threshold

            if self.logger and (i == 0 or (i + 1) % 10 == 0 or converged):
                status = " (converged)" if converged else ""
                self.logger.info(
                    f"  Iteration {i + 1}/{self.max_iteration}{status} "
                    f"(T_assign={t_assign.elapsed:.6f}s, "
                    f"T_update={t_update.elapsed:.6f}s, "
                    f"T_iter={t_iter_elapsed:.6f}s, "
                    f"shift={shift:.2e})"
                )

            centroids = new_centroids

            if converged:
                if self.logger:
                    self.logger.info(
                        f"  Convergence reached after {i + 1} iterations "
                        f"(shift={shift:.2e} <= {threshold:.2e})"
                    )
                break

        self._write_assignments(buffer, self.assign_clusters(elements, centroids))

        return FittedKMeans(
            centroids=self.freeze_centroids(centroids),
            assignments=buffer,
            n_iters_actual=timings.n_iters,
            converged=converged,
            timings=timings,
            model=self,
        )

    def init_centroids(self, elements: Sequence[Any]) -> Any:
        """Начальные центроиды: K случайных элементов с возвращением."""
        indices = sample_indices(len(elements), self.K, self.rng)
        return self.take(elements, indices)

    def _prepare_assignments(
        self, n: int, assignments: MutableSequence[int] | None
    ) -> MutableSequence[int]:
        if assignments is None:
            return self.new_assignments(n)
        if len(assignments) != n:
            raise AssignmentBufferError(
                f"Assignment buffer has length {len(assignments)}, "
                f"expected {n} (one slot per element)"
            )
        return assignments

    @staticmethod
    def _write_assignments(buffer: MutableSequence[int], labels: Sequence[int]) -> None:
        if isinstance(buffer, np.ndarray):
            buffer[:] = labels
        else:
            buffer[:] = [int(label) for label in labels]

    def new_assignments(self, n: int) -> MutableSequence[int]:
        return [0] * n

    def freeze_centroids(self, centroids: Any) -> Sequence[Any]:
        return tuple(centroids)

    @abstractmethod
    def empty_centroids(self, elements: Sequence[Any]) -> Sequence[Any]:
        """Центроиды для пустого входа."""
        raise NotImplementedError

    @abstractmethod
    def take(self, elements: Sequence[Any], indices: np.ndarray) -> Any:
        """Копия элементов по индексам."""
        raise NotImplementedError

    @abstractmethod
    def assign_clusters(self, elements: Sequence[Any], centroids: Any) -> Sequence[int]:
        """Шаг назначения элементов кластерам."""
        raise NotImplementedError

    @abstractmethod
    def update_centroids(self, elements: Sequence[Any], labels: Sequence[int]) -> Any:
        """Шаг обновления центроидов по присвоенным меткам."""
        raise NotImplementedError

    @abstractmethod
    def centroid_shift(self, old_centroids: Any, new_centroids: Any) -> float:
        """Сумма квадратов сдвигов центроидов с одинаковым индексом."""
        raise NotImplementedError

    @abstractmethod
    def nearest_index(self, element: Any, centroids: Any) -> int:
        """Индекс ближайшего центроида для одного элемента."""
        raise NotImplementedError
