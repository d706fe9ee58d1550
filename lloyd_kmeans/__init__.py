"""K-means (алгоритм Ллойда) для произвольных элементов и матриц NumPy."""

from .config import DEFAULT_MAX_ITERATION, KMeansConfig
from .core import (
    FittedKMeans,
    KMeansBase,
    KMeansCPUNumpy,
    KMeansElement,
    KMeansElements,
    Scalar,
    Vector,
    cluster,
)
from .exceptions import (
    AssignmentBufferError,
    DatasetFormatError,
    EmptyModelError,
    InvalidParameterError,
    KMeansError,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_MAX_ITERATION",
    "KMeansConfig",
    "KMeansBase",
    "KMeansElements",
    "KMeansCPUNumpy",
    "FittedKMeans",
    "KMeansElement",
    "Scalar",
    "Vector",
    "cluster",
    "KMeansError",
    "InvalidParameterError",
    "AssignmentBufferError",
    "EmptyModelError",
    "DatasetFormatError",
]
