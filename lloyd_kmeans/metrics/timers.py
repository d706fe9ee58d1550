"""
Таймеры шагов KMeans.

Timer измеряет один участок кода через time.perf_counter(), FitTimings
накапливает время шагов назначения и обновления за один вызов fit(...).
"""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any


class Timer:
    """
    Контекстный менеджер для замера времени.

    Пример:
        with Timer() as t:
            labels = model.assign_clusters(elements, centroids)
        t.elapsed
    """

    def __init__(self) -> None:
        self.start: float = 0.0
        self.end: float = 0.0
        self.elapsed: float = 0.0

    def __enter__(self) -> Timer:
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args: Any) -> None:
        self.end = time.perf_counter()
        self.elapsed = self.end - self.start


@dataclass
class FitTimings:
    """Агрегированные тайминги одного fit: T_назначения, T_обновления, T_итерации."""

    t_assign_total: float = 0.0
    t_update_total: float = 0.0
    t_iter_total: float = 0.0
    n_iters: int = 0

    def add(self, t_assign: float, t_update: float) -> float:
        """Учитывает одну итерацию и возвращает её суммарное время."""
        t_iter = t_assign + t_update
        self.t_assign_total += t_assign
        self.t_update_total += t_update
        self.t_iter_total += t_iter
        self.n_iters += 1
        return t_iter

    def as_dict(self) -> dict[str, float]:
        return {
            "T_assign_total": self.t_assign_total,
            "T_update_total": self.t_update_total,
            "T_iter_total": self.t_iter_total,
            "n_iters": float(self.n_iters),
        }
