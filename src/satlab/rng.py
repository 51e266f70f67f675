"""Random source resolution for instance generation and resampling."""

from typing import Optional, Union

import numpy as np

from satlab.exceptions import GenerationError

RandomSource = Union[np.random.Generator, int, None]


def resolve_rng(rng: RandomSource = None) -> np.random.Generator:
    """
    Turn a random source argument into a NumPy generator.

    Args:
        rng: A caller-supplied ``numpy.random.Generator`` (returned as is), an
            integer seed, or ``None`` for a fresh generator seeded from OS
            entropy

    Returns:
        The generator to draw from

    Raises:
        GenerationError: If the seed is negative
    """
    if isinstance(rng, np.random.Generator):
        return rng
    if isinstance(rng, (int, np.integer)) and rng < 0:
        raise GenerationError(f"Random seed must be non-negative, got {rng}")
    if rng is None or isinstance(rng, (int, np.integer)):
        return np.random.default_rng(rng)
    raise TypeError(f"Expected a numpy Generator, an int seed or None, got {type(rng).__name__}")


def derive_seeds(seed: Optional[int], count: int) -> list[Optional[int]]:
    """Consecutive seeds starting at ``seed``, or ``None`` for each entry if unseeded."""
    return [seed + i if seed is not None else None for i in range(count)]
