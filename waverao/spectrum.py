"""Power spectra and spectral ratios.

This module provides:
- Periodogram power spectra of zero-padded time series
- Elementwise spectral ratios used for the RAO and the wave spectrum
- Frequency axes for bin-indexed spectra
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .transform import fft_magnitude


def periodogram(magnitudes: ArrayLike) -> NDArray[np.float32]:
    """Square a magnitude spectrum to obtain power.

    Args:
        magnitudes: |F[k]| per frequency bin.

    Returns:
        S[k] = F[k]^2 as float32.
    """
    F = np.asarray(magnitudes, dtype=np.float32)
    return F * F


def power_spectrum(time_series: ArrayLike) -> NDArray[np.float32]:
    """Unnormalised periodogram of a time series.

    The series is zero-padded to the next power of two. No window is applied
    and the result is not divided by the number of samples.

    Args:
        time_series: Real-valued samples.

    Returns:
        Power per frequency bin, length ``next_power_of_two(len(time_series))``.
    """
    return periodogram(fft_magnitude(time_series))


def spectral_ratio(
    numerator: ArrayLike,
    denominator: ArrayLike,
) -> NDArray[np.float32]:
    """Elementwise ratio of two equal-length spectra.

    Bins where the denominator is zero are set to +inf, meaning the response
    at that frequency is unbounded. The sentinel is a result, not an error.

    Args:
        numerator: Spectrum on top.
        denominator: Spectrum underneath, same length as ``numerator``.

    Returns:
        numerator / denominator per bin.
    """
    num = np.asarray(numerator, dtype=np.float32)
    den = np.asarray(denominator, dtype=np.float32)

    with np.errstate(divide="ignore", invalid="ignore"):
        result = np.where(den == 0, np.float32(np.inf), num / den)

    return result.astype(np.float32)


def calculate_rao(
    heave_spectrum: ArrayLike,
    wave_spectrum: ArrayLike,
) -> NDArray[np.float32]:
    """Response Amplitude Operator from heave and wave elevation spectra."""
    return spectral_ratio(heave_spectrum, wave_spectrum)


def wave_energy_spectrum(
    heave_spectrum: ArrayLike,
    rao: ArrayLike,
) -> NDArray[np.float32]:
    """Wave energy spectrum from a heave spectrum and the vessel RAO."""
    return spectral_ratio(heave_spectrum, rao)


def frequency_resolution(n_bins: int, dt: float) -> float:
    """Bin spacing in Hz for an ``n_bins`` spectrum sampled every ``dt`` seconds."""
    return 1.0 / (dt * n_bins)


def bin_frequencies(n_bins: int, dt: float) -> NDArray[np.floating]:
    """Frequency in Hz of every bin: f[i] = i / (dt * n_bins).

    Args:
        n_bins: Spectrum length (the RAO length).
        dt: Time between successive samples in seconds.

    Returns:
        Frequencies for bins 0..n_bins-1. Bin n_bins/2 is the Nyquist
        frequency; later bins mirror the earlier ones.
    """
    return np.arange(n_bins) * frequency_resolution(n_bins, dt)
