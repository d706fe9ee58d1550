"""
Тесты загрузки точек из текстовых файлов.
"""

import numpy as np
import pytest

from lloyd_kmeans.data.dataset import load_points
from lloyd_kmeans.exceptions import DatasetFormatError


def _write(tmp_path, text):
    path = tmp_path / "points.txt"
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadPoints:
    def test_parses_points(self, tmp_path):
        path = _write(tmp_path, "# x y\n0 0\n1.5 2\n\n10 -3\n")

        X = load_points(path)

        assert X.shape == (3, 2)
        assert X.dtype == np.float64
        np.testing.assert_allclose(X[1], [1.5, 2.0])

    def test_empty_file(self, tmp_path):
        X = load_points(_write(tmp_path, "# nothing here\n"))
        assert X.shape == (0, 0)

    def test_ragged_rows(self, tmp_path):
        with pytest.raises(DatasetFormatError, match=":3:"):
            load_points(_write(tmp_path, "1 2\n3 4\n5\n"))

    def test_non_numeric(self, tmp_path):
        with pytest.raises(DatasetFormatError):
            load_points(_write(tmp_path, "1 2\nfoo 4\n"))

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_points(tmp_path / "missing.txt")

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "points.txt"
        path.write_bytes(b"1 2\n\xff\xfe 3\n")

        with pytest.raises(DatasetFormatError, match="UTF-8"):
            load_points(path)
