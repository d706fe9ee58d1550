"""
Загрузка точек для кластеризации из текстовых файлов.

Формат: одна точка на строку, координаты через пробел. Строки, начинающиеся
с #, и пустые строки пропускаются.
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from lloyd_kmeans.exceptions import DatasetFormatError

logger = logging.getLogger(__name__)


def load_points(path: str | Path) -> np.ndarray:
    """
    Читает точки из текстового файла.

    Args:
        path: Путь к файлу

    Returns:
        Массив формы (N, D), float64. Для файла без точек форма (0, 0).

    Raises:
        DatasetFormatError: Нечисловое значение, строки разной размерности
            или файл не в кодировке UTF-8
    """
    path = Path(path)
    points: list[np.ndarray] = []

    logger.info(f"Loading points from {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            for line_no, line in enumerate(f, start=1):
                line = line.strip()
                # Пропускаем комментарии и пустые строки
                if not line or line.startswith("#"):
                    continue

                try:
                    values = np.array(line.split(), dtype=np.float64)
                except ValueError as e:
                    raise DatasetFormatError(f"{path}:{line_no}: {e}") from e

                if points and values.shape != points[0].shape:
                    raise DatasetFormatError(
                        f"{path}:{line_no}: expected {points[0].size} values, "
                        f"got {values.size}"
                    )
                points.append(values)
    except UnicodeDecodeError as e:
        raise DatasetFormatError(f"{path}: file is not valid UTF-8 text ({e})") from e

    if not points:
        logger.info("No points found")
        return np.empty((0, 0), dtype=np.float64)

    X = np.vstack(points)
    logger.info(f"Points loaded: X.shape={X.shape}")
    return X
