"""Core driver functions for wave spectrum estimation.

This module provides the two pipeline operations and the file-driven run that
chains them:

1. ``characterise_rao``: RAO from paired calibration records
2. ``estimate_wave_spectrum``: wave spectrum from sea-going acceleration
3. ``run_estimation``: load records, do 1 then 2, return a WaveSpectrum
"""

import numpy as np
from numpy.typing import ArrayLike

from . import buffer
from .buffer import NumericBuffer
from .exceptions import LengthMismatchError, SizeOverflowError
from .integrate import integrate_motion
from .io import load_samples
from .spectrum import calculate_rao, power_spectrum, wave_energy_spectrum
from .types import EstimationConfig, WaveSpectrum
from .uncertainty import MidpointSampler, UncertaintySampler, UniformSampler, apply_uncertainty


def characterise_rao(
    heave_displacement: ArrayLike,
    wave_elevation: ArrayLike,
    heave_uncertainty: float,
    elevation_uncertainty: float,
    sampler: UncertaintySampler | None = None,
    verbose: int = 0,
) -> NumericBuffer:
    """Characterise the vessel RAO from calibration measurements.

    Both records are perturbed within their measurement uncertainty, turned
    into power spectra, and divided (heave / elevation).

    Args:
        heave_displacement: Heave displacement of the vessel.
        wave_elevation: Wave elevation measured alongside, same length.
        heave_uncertainty: Heave measurement uncertainty.
        elevation_uncertainty: Wave elevation measurement uncertainty.
        sampler: Uniform sampler for uncertainty injection. If None, samples
            are left at their measured values.
        verbose: Verbosity level (0=silent, 1=normal, 2=detailed).

    Returns:
        RAO with the power-of-two padded calibration length. Bins where the
        wave elevation spectrum is zero hold +inf.

    Raises:
        LengthMismatchError: If the two records differ in length.
    """
    heave = np.asarray(heave_displacement, dtype=np.float32).ravel()
    elevation = np.asarray(wave_elevation, dtype=np.float32).ravel()

    if heave.size != elevation.size:
        raise LengthMismatchError(
            "The number of data points in the supplied heave motion and wave "
            f"elevation measurements do not match ({heave.size} heave values, "
            f"{elevation.size} wave elevation values)",
            heave.size,
            elevation.size,
        )

    if sampler is None:
        sampler = MidpointSampler()

    if verbose >= 1:
        print(f"Characterising RAO from {heave.size} calibration samples")

    with NumericBuffer.from_values(
        apply_uncertainty(heave, heave_uncertainty, sampler)
    ) as heave_buf, NumericBuffer.from_values(
        apply_uncertainty(elevation, elevation_uncertainty, sampler)
    ) as elevation_buf:
        if verbose >= 2:
            print("Computing heave displacement power spectrum...")
        with NumericBuffer.from_values(power_spectrum(heave_buf.values)) as heave_spectrum:
            if verbose >= 2:
                print("Computing wave elevation power spectrum...")
            with NumericBuffer.from_values(power_spectrum(elevation_buf.values)) as wave_spectrum:
                rao = NumericBuffer.from_values(
                    calculate_rao(heave_spectrum.values, wave_spectrum.values)
                )

    if verbose >= 1:
        print(f"RAO length: {len(rao)} bins")

    return rao


def estimate_wave_spectrum(
    rao: NumericBuffer | ArrayLike,
    heave_acceleration: ArrayLike,
    accel_resolution: float,
    accel_dt: float,
    sampler: UncertaintySampler | None = None,
    verbose: int = 0,
) -> NumericBuffer:
    """Estimate the wave energy spectrum from heave acceleration.

    Pipeline:

    1. Reject records too long to pad to a power of two
    2. Perturb samples within the accelerometer resolution
    3. Integrate acceleration to drift-free position
    4. Zero-pad position to the RAO length
    5. Compute the heave power spectrum
    6. Divide by the RAO

    Args:
        rao: Previously characterised RAO.
        heave_acceleration: Heave acceleration measured at sea.
        accel_resolution: Accelerometer measurement resolution.
        accel_dt: Time between accelerometer samples in seconds.
        sampler: Uniform sampler for uncertainty injection. If None, samples
            are left at their measured values.
        verbose: Verbosity level (0=silent, 1=normal, 2=detailed).

    Returns:
        Wave energy spectrum with the RAO's length.

    Raises:
        SizeOverflowError: If the record has more than MAX_BUFFER_LENGTH / 2
            samples.
        LengthMismatchError: If the heave spectrum does not come out at the
            RAO length (the record is longer than the calibration records).
        ValueError: If ``accel_dt`` is zero.
    """
    acceleration = np.asarray(heave_acceleration, dtype=np.float32).ravel()
    rao_values = np.asarray(rao, dtype=np.float32).ravel()

    max_samples = buffer.MAX_BUFFER_LENGTH // 2
    if acceleration.size > max_samples:
        raise SizeOverflowError(
            "Too many values in the heave acceleration record. "
            f"Found {acceleration.size} out of a maximum of {max_samples}"
        )
    if accel_dt == 0.0:
        raise ValueError(f"Invalid timestep value: {accel_dt}")

    if sampler is None:
        sampler = MidpointSampler()

    if verbose >= 1:
        print(f"Estimating wave spectrum from {acceleration.size} acceleration samples")

    with NumericBuffer.from_values(
        apply_uncertainty(acceleration, accel_resolution, sampler)
    ) as heave:
        if verbose >= 2:
            print("Integrating acceleration to position...")
        integrate_motion(heave, accel_dt)

        if len(heave) < len(rao_values):
            heave.extend_to(len(rao_values))

        if verbose >= 2:
            print("Computing heave power spectrum...")
        with NumericBuffer.from_values(power_spectrum(heave.values)) as heave_spectrum:
            heave_spectrum.extend_to(len(rao_values))
            if len(heave_spectrum) != len(rao_values):
                raise LengthMismatchError(
                    f"Heave spectrum length ({len(heave_spectrum)}) does not match "
                    f"RAO length ({len(rao_values)}); the acceleration record is "
                    "longer than the calibration records",
                    len(heave_spectrum),
                    len(rao_values),
                )
            estimate = NumericBuffer.from_values(
                wave_energy_spectrum(heave_spectrum.values, rao_values)
            )

    return estimate


def run_estimation(
    config: EstimationConfig,
    sampler: UncertaintySampler | None = None,
    verbose: int = 1,
) -> WaveSpectrum:
    """Estimate the wave spectrum from the records named in ``config``.

    Convenience wrapper that loads the three records and chains
    ``characterise_rao`` and ``estimate_wave_spectrum``.

    Args:
        config: Run configuration.
        sampler: Uniform sampler. If None, a UniformSampler seeded with
            ``config.seed`` is used.
        verbose: Verbosity level (0=silent, 1=normal, 2=detailed).

    Returns:
        WaveSpectrum holding the estimate and the RAO.
    """
    if sampler is None:
        sampler = UniformSampler(config.seed)

    if verbose >= 1:
        print("Wave spectrum estimation")
        print(f"  Heave displacement: {config.heave_displacement_path}")
        print(f"  Wave elevation: {config.wave_elevation_path}")
        print(f"  Heave acceleration: {config.heave_acceleration_path}")
        print(f"  Timestep: {config.timestep} s")

    heave_displacement = load_samples(config.heave_displacement_path)
    wave_elevation = load_samples(config.wave_elevation_path)

    rao = characterise_rao(
        heave_displacement,
        wave_elevation,
        config.heave_uncertainty,
        config.elevation_uncertainty,
        sampler=sampler,
        verbose=max(0, verbose - 1),
    )

    heave_acceleration = load_samples(config.heave_acceleration_path)

    estimate = estimate_wave_spectrum(
        rao,
        heave_acceleration,
        config.accelerometer_resolution,
        config.timestep,
        sampler=sampler,
        verbose=max(0, verbose - 1),
    )

    result = WaveSpectrum(S=estimate.values, rao=rao.values, dt=config.timestep)

    if verbose >= 1:
        print(f"\nEstimation complete. {result.n_bins} bins, df = {result.df:.4f} Hz")

    return result
