"""
Random k-SAT instance generation for benchmarking and experiment suites.
"""

import logging
import os
from typing import Optional, Union

from satlab.instance import Instance
from satlab.rng import derive_seeds

logger = logging.getLogger(__name__)


def generate_random_ksat(n_vars: int, n_clauses: int, k: int = 3, seed: Optional[int] = None) -> Instance:
    """Generate one random k-SAT instance, reproducible when ``seed`` is given."""
    return Instance.generate_random(n_vars, n_clauses, k, rng=seed)


def batch_generate_ksat(
    n_vars: int,
    n_clauses: int,
    k: int = 3,
    n_instances: int = 10,
    seed: Optional[int] = None,
) -> list[Instance]:
    """Batch-generate random k-SAT instances, seeding instance ``i`` with ``seed + i``."""
    return [generate_random_ksat(n_vars, n_clauses, k, s) for s in derive_seeds(seed, n_instances)]


def save_batch(
    instances: list[Instance],
    output_dir: Union[str, os.PathLike],
    prefix: str = "instance",
) -> list[str]:
    """
    Write each instance to ``<output_dir>/<prefix>_<i>.cnf``.

    Returns:
        The paths written, in order
    """
    os.makedirs(output_dir, exist_ok=True)

    paths = []
    for i, instance in enumerate(instances):
        path = os.path.join(output_dir, f"{prefix}_{i}.cnf")
        instance.save(path)
        paths.append(path)

    logger.info(f"Wrote {len(paths)} instances to {output_dir}")
    return paths
