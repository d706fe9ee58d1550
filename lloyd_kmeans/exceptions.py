"""
Иерархия исключений пакета lloyd_kmeans.

Все ошибки конфигурации наследуются от ValueError, чтобы вызывающий код,
ловящий ValueError, продолжал работать без изменений.
"""

from __future__ import annotations


class KMeansError(Exception):
    """Базовое исключение для всех ошибок пакета."""


class InvalidParameterError(KMeansError, ValueError):
    """
    Некорректные параметры кластеризации.

    Возникает, если:
    - n_clusters <= 1;
    - max_iteration < 0;
    - converge_distance отрицателен;
    - seed не является int, Generator или None.
    """


class AssignmentBufferError(KMeansError, ValueError):
    """Буфер назначений не совпадает по длине с входными элементами."""


class EmptyModelError(KMeansError, LookupError):
    """Поиск ближайшего центроида у модели, обученной на пустом входе."""


class DatasetFormatError(KMeansError, ValueError):
    """Файл с точками не удаётся разобрать (нечисловые значения, разная размерность)."""
