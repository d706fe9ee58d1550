# main.py
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from lloyd_kmeans.config import DEFAULT_MAX_ITERATION, KMeansConfig
from lloyd_kmeans.core import IMPLEMENTATIONS, FittedKMeans, as_vectors
from lloyd_kmeans.data.dataset import load_points
from lloyd_kmeans.exceptions import KMeansError
from lloyd_kmeans.metrics import cluster_sizes, inertia
from lloyd_kmeans.utils.logging import PrefixedLogger, format_fit_prefix, setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lloyd-kmeans",
        description="Кластеризация точек из текстового файла алгоритмом Ллойда.",
    )
    parser.add_argument("path", type=str, help="Файл с точками (одна точка на строку).")
    parser.add_argument(
        "-k",
        "--n-clusters",
        type=int,
        required=True,
        help="Количество кластеров (k > 1).",
    )
    parser.add_argument(
        "--max-iteration",
        type=int,
        default=DEFAULT_MAX_ITERATION,
        help=f"Максимальное число итераций (по умолчанию {DEFAULT_MAX_ITERATION}).",
    )
    parser.add_argument(
        "--converge-distance",
        type=float,
        default=None,
        help="Порог сходимости: остановка, когда суммарный сдвиг центроидов "
        "не превышает его квадрата.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed генератора случайных чисел для воспроизводимости.",
    )
    parser.add_argument(
        "--impl",
        type=str,
        choices=sorted(IMPLEMENTATIONS),
        default="numpy",
        help="Реализация: numpy (векторизованная) или elements (поэлементная).",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def _centroids_to_lists(centroids: Sequence[Any], d: int) -> List[List[float]]:
    # Нулевой Vector безразмерен, поэтому приводим всё к длине d
    return [np.broadcast_to(np.asarray(c, dtype=np.float64), (d,)).tolist() for c in centroids]


def summarize(fitted: FittedKMeans, elements: Any, d: int) -> Dict[str, Any]:
    """Сводка результата в виде JSON-совместимого словаря."""
    return {
        "n_clusters": fitted.n_clusters,
        "centroids": _centroids_to_lists(fitted.centroids, d),
        "assignments": [int(a) for a in fitted.assignments],
        "n_iters": fitted.n_iters_actual,
        "converged": fitted.converged,
        "inertia": inertia(elements, fitted.centroids, fitted.assignments),
        "cluster_sizes": cluster_sizes(fitted.assignments, fitted.n_clusters),
        "timings": fitted.timings.as_dict(),
    }


def run(args: argparse.Namespace, logger: logging.Logger) -> Dict[str, Any]:
    config = KMeansConfig.from_args(args)
    X = load_points(args.path)
    n, d = X.shape

    prefixed = PrefixedLogger(logger, format_fit_prefix(n, config.n_clusters, d))
    model = IMPLEMENTATIONS[args.impl].from_config(config, logger=prefixed)

    elements = X if args.impl == "numpy" else as_vectors(X)
    fitted = model.fit(elements)

    logger.info(
        f"Finished in {fitted.n_iters_actual} iterations "
        f"(converged={fitted.converged}, T_iter_total={fitted.timings.t_iter_total:.6f}s)"
    )
    return summarize(fitted, elements, d)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logger(getattr(logging, args.log_level))

    try:
        summary = run(args, logger)
    except (KMeansError, OSError) as e:
        logger.error(f"Clustering failed: {e}")
        return 1

    json.dump(summary, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
