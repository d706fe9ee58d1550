"""
Тесты конфигурации KMeans.
"""

import argparse

import numpy as np
import pytest

from lloyd_kmeans.config import DEFAULT_MAX_ITERATION, KMeansConfig
from lloyd_kmeans.core import KMeansCPUNumpy, KMeansElements
from lloyd_kmeans.exceptions import InvalidParameterError


class TestKMeansConfig:
    def test_defaults(self):
        config = KMeansConfig(n_clusters=2)

        assert config.max_iteration == DEFAULT_MAX_ITERATION == 300
        assert config.converge_distance is None
        assert config.converge_square_distance is None

    def test_converge_square_distance(self):
        assert KMeansConfig(n_clusters=2, converge_distance=0.5).converge_square_distance == 0.25

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"n_clusters": 1},
            {"n_clusters": True},
            {"n_clusters": 2.0},
            {"n_clusters": 2, "max_iteration": -1},
            {"n_clusters": 2, "max_iteration": 1.5},
            {"n_clusters": 2, "converge_distance": -1.0},
            {"n_clusters": 2, "seed": "abc"},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(InvalidParameterError):
            KMeansConfig(**kwargs)

    def test_accepts_generator_seed(self):
        config = KMeansConfig(n_clusters=2, seed=np.random.default_rng(0))
        assert isinstance(config.seed, np.random.Generator)

    def test_from_args(self):
        args = argparse.Namespace(
            n_clusters=4, max_iteration=10, converge_distance=0.1, seed=42
        )
        config = KMeansConfig.from_args(args)

        assert config == KMeansConfig(
            n_clusters=4, max_iteration=10, converge_distance=0.1, seed=42
        )

    @pytest.mark.parametrize("model_cls", [KMeansElements, KMeansCPUNumpy])
    def test_from_config(self, model_cls):
        config = KMeansConfig(n_clusters=3, max_iteration=7, converge_distance=0.0, seed=1)
        model = model_cls.from_config(config)

        assert model.K == 3
        assert model.max_iteration == 7
        assert model.config == config

    def test_accepts_numpy_integers(self):
        config = KMeansConfig(
            n_clusters=np.int64(2), max_iteration=np.int32(5), seed=np.int64(3)
        )

        assert config.n_clusters == 2 and type(config.n_clusters) is int
        assert config.max_iteration == 5 and type(config.max_iteration) is int
        assert config.seed == 3 and type(config.seed) is int

    def test_numpy_integers_in_model(self, small_dataset):
        a = KMeansCPUNumpy(n_clusters=np.int64(2), max_iteration=np.int64(5), seed=np.int64(3))
        b = KMeansCPUNumpy(n_clusters=2, max_iteration=5, seed=3)

        assert a.K == 2
        np.testing.assert_array_equal(
            a.fit(small_dataset).centroids, b.fit(small_dataset).centroids
        )

    def test_rejects_bool_seed(self):
        with pytest.raises(InvalidParameterError):
            KMeansConfig(n_clusters=2, seed=True)
