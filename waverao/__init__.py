"""waverao - wave spectrum estimation from ship motion.

A Python package for estimating the ocean wave energy spectrum from shipboard
heave accelerometer data, using the vessel's Response Amplitude Operator (RAO)
characterised from calibration measurements.

Main Functions
--------------
characterise_rao : RAO from paired heave displacement / wave elevation records
estimate_wave_spectrum : Wave spectrum from heave acceleration and an RAO
run_estimation : File-driven run chaining both steps

Signal Processing
-----------------
fft_magnitude : Radix-2 DIT FFT magnitude spectrum
power_spectrum : Unnormalised periodogram
spectral_ratio : Elementwise ratio with +inf for zero denominators
integrate_motion : Acceleration to drift-free position

Data Structures
---------------
NumericBuffer : Growable float32 sample buffer
EstimationConfig : Run configuration
WaveSpectrum : Estimated spectrum with its RAO and frequency axis

Example
-------
>>> import numpy as np
>>> from waverao import characterise_rao, estimate_wave_spectrum
>>>
>>> rao = characterise_rao(heave, elevation, 0.1, 0.1)
>>> spectrum = estimate_wave_spectrum(rao, acceleration, 0.1, accel_dt=0.1)
>>> print(spectrum.values[: len(spectrum) // 2 + 1])
"""

__version__ = "0.1.0"

# Core driver functions
from .core import characterise_rao, estimate_wave_spectrum, run_estimation

# Data structures
from .buffer import MAX_BUFFER_LENGTH, NumericBuffer
from .types import EstimationConfig, WaveSpectrum

# Errors
from .exceptions import (
    EmptySourceError,
    IngestionError,
    LengthMismatchError,
    MalformedSourceError,
    OutOfMemoryError,
    SizeOverflowError,
    SourceNotFoundError,
    WaveRAOError,
)

# Signal processing
from .integrate import integrate_motion, integrate_twice, remove_drift
from .spectrum import bin_frequencies, periodogram, power_spectrum, spectral_ratio
from .transform import fft_magnitude, next_power_of_two

# Collaborators
from .io import load_samples
from .uncertainty import MidpointSampler, UniformSampler, apply_uncertainty

__all__ = [
    # Core functions
    "characterise_rao",
    "estimate_wave_spectrum",
    "run_estimation",
    # Data structures
    "NumericBuffer",
    "MAX_BUFFER_LENGTH",
    "EstimationConfig",
    "WaveSpectrum",
    # Errors
    "WaveRAOError",
    "OutOfMemoryError",
    "SizeOverflowError",
    "LengthMismatchError",
    "IngestionError",
    "SourceNotFoundError",
    "EmptySourceError",
    "MalformedSourceError",
    # Signal processing
    "next_power_of_two",
    "fft_magnitude",
    "periodogram",
    "power_spectrum",
    "spectral_ratio",
    "bin_frequencies",
    "integrate_twice",
    "remove_drift",
    "integrate_motion",
    # Collaborators
    "load_samples",
    "UniformSampler",
    "MidpointSampler",
    "apply_uncertainty",
]
