"""Measurement uncertainty injection.

Every measured sample ``v`` with uncertainty ``u`` is replaced by one draw
from Uniform(v - u/2, v + u/2) before it enters the pipeline.
"""

from typing import Protocol

import numpy as np
from numpy.typing import ArrayLike, NDArray


class UncertaintySampler(Protocol):
    """Anything that can draw one value from a uniform interval."""

    def sample_uniform(self, lower: float, upper: float) -> float: ...


class UniformSampler:
    """Random uniform draws from a seeded numpy Generator.

    Args:
        seed: Seed for reproducible draws. None seeds from the OS.
    """

    def __init__(self, seed: int | None = None):
        self.rng = np.random.default_rng(seed)

    def sample_uniform(self, lower: float, upper: float) -> float:
        return float(self.rng.uniform(lower, upper))


class MidpointSampler:
    """Deterministic sampler returning the centre of the interval."""

    def sample_uniform(self, lower: float, upper: float) -> float:
        return (lower + upper) / 2.0


def apply_uncertainty(
    values: ArrayLike,
    uncertainty: float,
    sampler: UncertaintySampler,
) -> NDArray[np.float32]:
    """Perturb each sample within its measurement uncertainty.

    Args:
        values: Measured samples.
        uncertainty: Width of the uniform interval around each sample.
        sampler: Source of uniform draws, called once per sample.

    Returns:
        New float32 array of perturbed samples.
    """
    data = np.asarray(values, dtype=np.float32).ravel()
    half_width = np.float32(uncertainty) / np.float32(2.0)

    perturbed = np.empty_like(data)
    for i, v in enumerate(data):
        perturbed[i] = sampler.sample_uniform(float(v - half_width), float(v + half_width))

    return perturbed
