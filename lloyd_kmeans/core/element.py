"""
Элементы, которые умеет кластеризовать KMeansElements.

KMeansElement является структурным протоколом: наследоваться от него не нужно, достаточно
реализовать нулевое значение, сложение, деление на целое число и квадрат
расстояния. Scalar и Vector: готовые реализации для одномерных признаков и
векторов признаков на NumPy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, TypeVar, runtime_checkable

import numpy as np

T = TypeVar("T", bound="KMeansElement")


@runtime_checkable
class KMeansElement(Protocol):
    """Набор операций, необходимых алгоритму Ллойда."""

    @classmethod
    def zero_value(cls: type[T]) -> T:
        """Нейтральный элемент сложения (центроид пустого кластера)."""
        ...

    def __add__(self: T, other: T) -> T:
        ...

    def __truediv__(self: T, count: int) -> T:
        ...

    def square_distance(self: T, other: T) -> float:
        """Неотрицательная мера несходства (квадрат расстояния)."""
        ...


@dataclass(frozen=True)
class Scalar:
    """Одномерный числовой признак."""

    value: float

    @classmethod
    def zero_value(cls) -> Scalar:
        return cls(0.0)

    def __add__(self, other: Scalar) -> Scalar:
        return Scalar(self.value + other.value)

    def __truediv__(self, count: int) -> Scalar:
        return Scalar(self.value / count)

    def __float__(self) -> float:
        return float(self.value)

    def square_distance(self, other: Scalar) -> float:
        diff = self.value - other.value
        return float(diff * diff)


@dataclass(frozen=True, eq=False)
class Vector:
    """
    Вектор признаков поверх np.ndarray (float64).

    Нулевое значение есть безразмерный ноль (0-d массив): благодаря broadcasting
    он складывается с вектором любой размерности и не меняет его, а от
    настоящего центроида в начале координат отличается через is_neutral.
    """

    values: np.ndarray

    def __post_init__(self) -> None:
        # Собственная копия только для чтения: центроид не зависит от входной матрицы
        arr = np.array(self.values, dtype=np.float64, copy=True)
        if arr.ndim > 1:
            raise ValueError(f"Vector expects a 1-D array, got shape {arr.shape}")
        arr.flags.writeable = False
        object.__setattr__(self, "values", arr)

    @classmethod
    def zero_value(cls) -> Vector:
        return cls(np.float64(0.0))

    @property
    def is_neutral(self) -> bool:
        """True для нулевого значения, возвращённого zero_value()."""
        return self.values.ndim == 0

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.values + other.values)

    def __truediv__(self, count: int) -> Vector:
        return Vector(self.values / count)

    def __array__(self, dtype: Any = None, copy: Any = None) -> np.ndarray:
        if dtype is None:
            return self.values.copy() if copy else self.values
        return self.values.astype(dtype)

    def __repr__(self) -> str:
        return f"Vector({self.values.tolist()!r})"

    def square_distance(self, other: Vector) -> float:
        diff = self.values - other.values
        return float(np.sum(diff * diff))


def as_vectors(X: np.ndarray) -> list[Vector]:
    """Разбивает матрицу (N, D) на список векторов."""
    X = np.asarray(X, dtype=np.float64)
    if X.ndim != 2:
        raise ValueError(f"Expected a 2-D array (N, D), got shape {X.shape}")
    return [Vector(row) for row in X]
