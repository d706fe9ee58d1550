"""
Тесты элементов Scalar и Vector.
"""

import numpy as np
import pytest

from lloyd_kmeans.core.element import KMeansElement, Scalar, Vector, as_vectors


class TestScalar:
    def test_arithmetic(self):
        assert Scalar(1.5) + Scalar(2.5) == Scalar(4.0)
        assert Scalar(9.0) / 3 == Scalar(3.0)
        assert float(Scalar(2.0)) == 2.0

    def test_zero_is_additive_identity(self):
        assert Scalar.zero_value() + Scalar(7.0) == Scalar(7.0)

    def test_square_distance(self):
        assert Scalar(1.0).square_distance(Scalar(4.0)) == 9.0
        assert Scalar(4.0).square_distance(Scalar(1.0)) == 9.0

    def test_satisfies_protocol(self):
        assert isinstance(Scalar(1.0), KMeansElement)


class TestVector:
    def test_arithmetic(self):
        v = Vector([1.0, 2.0]) + Vector([3.0, 4.0])
        np.testing.assert_allclose(np.asarray(v), [4.0, 6.0])
        np.testing.assert_allclose(np.asarray(v / 2), [2.0, 3.0])

    def test_zero_is_additive_identity_for_any_dimension(self):
        zero = Vector.zero_value()
        assert zero.is_neutral

        for dim in (1, 3, 7):
            v = Vector(np.arange(dim, dtype=float) + 1)
            np.testing.assert_allclose(np.asarray(zero + v), np.asarray(v))
            np.testing.assert_allclose(np.asarray(v + zero), np.asarray(v))

    def test_zero_distinguishable_from_origin(self):
        origin = Vector([0.0, 0.0])
        assert not origin.is_neutral
        assert Vector.zero_value().is_neutral
        assert Vector.zero_value().square_distance(origin) == 0.0

    def test_square_distance(self):
        assert Vector([0.0, 0.0]).square_distance(Vector([3.0, 4.0])) == 25.0
        assert Vector.zero_value().square_distance(Vector([1.0, 2.0])) == 5.0

    def test_rejects_matrix(self):
        with pytest.raises(ValueError):
            Vector(np.zeros((2, 2)))

    def test_satisfies_protocol(self):
        assert isinstance(Vector([1.0]), KMeansElement)

    def test_as_vectors(self, simple_2d_dataset):
        X, _ = simple_2d_dataset
        vectors = as_vectors(X)

        assert len(vectors) == 6
        np.testing.assert_allclose(np.asarray(vectors[3]), [10.0, 10.0])

        with pytest.raises(ValueError):
            as_vectors(np.zeros(3))
