"""Tests for measurement uncertainty injection."""

import numpy as np
import pytest

from waverao.uncertainty import MidpointSampler, UniformSampler, apply_uncertainty


class CountingSampler:
    """Records every interval it is asked to sample."""

    def __init__(self):
        self.calls = []

    def sample_uniform(self, lower, upper):
        self.calls.append((lower, upper))
        return lower


class TestSamplers:
    """Tests for the sampler implementations."""

    def test_midpoint(self):
        """MidpointSampler returns the interval centre."""
        assert MidpointSampler().sample_uniform(1.0, 3.0) == 2.0

    def test_uniform_in_bounds(self):
        """Uniform draws stay inside the interval."""
        sampler = UniformSampler(seed=0)

        draws = [sampler.sample_uniform(-1.0, 1.0) for _ in range(200)]

        assert all(-1.0 <= d < 1.0 for d in draws)

    def test_uniform_reproducible(self):
        """The same seed gives the same draws."""
        a = UniformSampler(seed=5)
        b = UniformSampler(seed=5)

        assert [a.sample_uniform(0, 1) for _ in range(5)] == [
            b.sample_uniform(0, 1) for _ in range(5)
        ]

    def test_zero_width(self):
        """A degenerate interval returns its single value."""
        assert UniformSampler(seed=1).sample_uniform(2.5, 2.5) == 2.5


class TestApplyUncertainty:
    """Tests for perturbing a series."""

    def test_interval_per_sample(self):
        """Each sample v is drawn from [v - u/2, v + u/2], once."""
        sampler = CountingSampler()

        apply_uncertainty([1.0, 2.0, 3.0], 0.5, sampler)

        assert sampler.calls == [(0.75, 1.25), (1.75, 2.25), (2.75, 3.25)]

    def test_returns_new_array(self):
        """The input is not modified."""
        values = np.array([1.0, 2.0], dtype=np.float32)

        perturbed = apply_uncertainty(values, 1.0, CountingSampler())

        np.testing.assert_array_equal(values, [1.0, 2.0])
        np.testing.assert_array_equal(perturbed, [0.5, 1.5])
        assert perturbed.dtype == np.float32

    def test_random_within_resolution(self):
        """Random perturbations stay within half the uncertainty."""
        values = np.linspace(-5, 5, 50)

        perturbed = apply_uncertainty(values, 0.2, UniformSampler(seed=3))

        assert np.all(np.abs(perturbed - values) <= 0.1 + 1e-6)

    @pytest.mark.parametrize("sampler", [MidpointSampler(), UniformSampler(seed=9)])
    def test_zero_uncertainty_is_identity(self, sampler):
        """Zero uncertainty leaves measurements unchanged."""
        values = np.array([0.1, -0.2, 3.0], dtype=np.float32)

        np.testing.assert_array_equal(apply_uncertainty(values, 0.0, sampler), values)
