"""Acceleration to position integration.

Two cascaded trapezoidal integrations turn heave acceleration into heave
position. Numerical integration accumulates a low-frequency bias, so the
position series has its mean removed afterwards.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import signal

from .buffer import NumericBuffer


def integrate_twice(acceleration: ArrayLike, dt: float) -> NDArray[np.float32]:
    """Integrate acceleration to position, starting from rest.

    speed[i]    = speed[i-1]    + dt * (a[i-1] + a[i]) / 2
    position[i] = position[i-1] + dt * (speed[i-1] + speed[i]) / 2

    The sample before the first is taken to have the first sample's
    acceleration, and zero speed and position.

    Args:
        acceleration: Acceleration samples in m/s^2.
        dt: Time between samples in seconds.

    Returns:
        Position samples in m (float32), without drift removal.
    """
    a = np.asarray(acceleration, dtype=np.float32).ravel()
    if a.size == 0:
        return a.copy()

    step = np.float32(dt) / np.float32(2.0)

    a_prev = np.concatenate((a[:1], a[:-1]))
    speed = np.cumsum(step * (a_prev + a), dtype=np.float32)

    speed_prev = np.concatenate((np.zeros(1, dtype=np.float32), speed[:-1]))
    return np.cumsum(step * (speed_prev + speed), dtype=np.float32)


def remove_drift(values: NDArray[np.float32]) -> None:
    """Subtract the arithmetic mean from ``values`` in place."""
    if values.size == 0:
        return
    values[:] = signal.detrend(values, type="constant")


def integrate_motion(
    acceleration: NumericBuffer | NDArray[np.float32],
    dt: float,
) -> None:
    """Replace acceleration samples with drift-free position, in place.

    Args:
        acceleration: Buffer (or float32 array) of acceleration samples.
            Overwritten with position samples.
        dt: Time between samples in seconds. Must be non-zero; that is
            checked by the caller.
    """
    values = acceleration.values if isinstance(acceleration, NumericBuffer) else acceleration
    values[:] = integrate_twice(values, dt)
    remove_drift(values)
