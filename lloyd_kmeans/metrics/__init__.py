from .timers import FitTimings, Timer
from .metrics import cluster_sizes, inertia

__all__ = [
    "Timer",
    "FitTimings",
    "inertia",
    "cluster_sizes",
]
