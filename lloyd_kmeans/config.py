from __future__ import annotations

import argparse
import numbers
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from lloyd_kmeans.exceptions import InvalidParameterError

# Верхняя граница числа итераций по умолчанию
DEFAULT_MAX_ITERATION = 300

SeedLike = Union[int, np.random.Generator, None]


def _as_int(name: str, value: object) -> int:
    """Целое число из int или целого типа NumPy; bool не принимается."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameterError(
            f"{name} must be an int, got {type(value).__name__}"
        )
    return int(value)


@dataclass(frozen=True)
class KMeansConfig:
    """
    Параметры одного запуска KMeans.

    Проверяет себя при создании: некорректная конфигурация является ошибкой вызывающего
    кода, поэтому исключение поднимается сразу, до начала обучения.
    """

    n_clusters: int
    max_iteration: int = DEFAULT_MAX_ITERATION
    converge_distance: Optional[float] = None
    seed: SeedLike = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "n_clusters", _as_int("n_clusters", self.n_clusters))
        if self.n_clusters <= 1:
            raise InvalidParameterError(
                f"k-means requires n_clusters > 1, got {self.n_clusters}"
            )
        object.__setattr__(
            self, "max_iteration", _as_int("max_iteration", self.max_iteration)
        )
        if self.max_iteration < 0:
            raise InvalidParameterError(
                f"max_iteration must be >= 0, got {self.max_iteration}"
            )
        if self.converge_distance is not None and self.converge_distance < 0:
            raise InvalidParameterError(
                f"converge_distance must be >= 0, got {self.converge_distance}"
            )
        if self.seed is not None and not isinstance(self.seed, np.random.Generator):
            if isinstance(self.seed, bool) or not isinstance(self.seed, numbers.Integral):
                raise InvalidParameterError(
                    f"seed must be an int, numpy Generator or None, "
                    f"got {type(self.seed).__name__}"
                )
            object.__setattr__(self, "seed", int(self.seed))

    @property
    def converge_square_distance(self) -> Optional[float]:
        """Порог сходимости в квадрате (сравнивается с суммарным сдвигом)."""
        if self.converge_distance is None:
            return None
        return float(self.converge_distance) ** 2

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> KMeansConfig:
        """Собирает конфигурацию из аргументов командной строки."""
        return cls(
            n_clusters=args.n_clusters,
            max_iteration=args.max_iteration,
            converge_distance=args.converge_distance,
            seed=args.seed,
        )
