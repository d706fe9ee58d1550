from .base import FittedKMeans, KMeansBase
from .cluster import cluster
from .cpu_numpy import KMeansCPUNumpy
from .element import KMeansElement, Scalar, Vector, as_vectors
from .elements import KMeansElements, nearest_index
from .sampling import make_rng, sample_indices

# Реализации, доступные из командной строки (--impl)
IMPLEMENTATIONS = {
    "elements": KMeansElements,
    "numpy": KMeansCPUNumpy,
}

__all__ = [
    "KMeansBase",
    "FittedKMeans",
    "KMeansElements",
    "KMeansCPUNumpy",
    "KMeansElement",
    "Scalar",
    "Vector",
    "as_vectors",
    "cluster",
    "nearest_index",
    "make_rng",
    "sample_indices",
    "IMPLEMENTATIONS",
]
