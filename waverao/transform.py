"""Radix-2 decimation-in-time FFT.

The transform works in single precision on power-of-two lengths. Inputs are
zero-padded to the next power of two before the recursion starts; only the
bin magnitudes are returned, since downstream stages need power and not phase.
"""

from functools import lru_cache

import numpy as np
from numpy.typing import ArrayLike, NDArray

from . import buffer
from .exceptions import SizeOverflowError

COMPLEX_DTYPE = np.complex64


def next_power_of_two(n: int) -> int:
    """Round ``n`` up to the next power of two.

    Args:
        n: Sample count (must be at least 1).

    Returns:
        Smallest power of two greater than or equal to ``n``.

    Raises:
        SizeOverflowError: If ``n`` is 0, or larger than half the maximum
            buffer length so the padded size would not fit.
    """
    n = int(n)
    if n < 0:
        raise ValueError(f"Length must be non-negative, got {n}")
    if n == 0:
        raise SizeOverflowError("Cannot pad an empty series to a power of two")
    if n > buffer.MAX_BUFFER_LENGTH // 2:
        raise SizeOverflowError(
            f"Length {n} is too large to pad to a power of two "
            f"(maximum is {buffer.MAX_BUFFER_LENGTH // 2})"
        )

    result = 1
    while result < n:
        result *= 2
    return result


@lru_cache(maxsize=64)
def _twiddles(n: int) -> NDArray[np.complex64]:
    """Twiddle factors exp(-2*pi*i*k/n) for k in [0, n/2)."""
    k = np.arange(n // 2)
    angle = (-2.0 * np.pi * k / n).astype(np.float32)
    w = np.empty(n // 2, dtype=COMPLEX_DTYPE)
    w.real = np.cos(angle)
    w.imag = np.sin(angle)
    w.flags.writeable = False
    return w


def _dit2(
    out: NDArray[np.complex64],
    x: NDArray[np.complex64],
    n: int,
    in_offset: int,
    stride: int,
    out_offset: int,
) -> None:
    """Transform the ``n`` samples x[in_offset::stride] into out[out_offset:out_offset+n]."""
    if n == 1:
        out[out_offset] = x[in_offset]
        return

    half = n // 2
    _dit2(out, x, half, in_offset, 2 * stride, out_offset)
    _dit2(out, x, half, in_offset + stride, 2 * stride, out_offset + half)

    even = out[out_offset : out_offset + half].copy()
    odd = _twiddles(n) * out[out_offset + half : out_offset + n]
    out[out_offset : out_offset + half] = even + odd
    out[out_offset + half : out_offset + n] = even - odd


def fft_magnitude(samples: ArrayLike) -> NDArray[np.float32]:
    """Magnitude spectrum of a real time series.

    The series is zero-padded to ``next_power_of_two(len(samples))``.

    Args:
        samples: Real-valued time series.

    Returns:
        float32 array of |F[k]| with the padded length.

    Raises:
        SizeOverflowError: If the series is empty or too long to pad.
        OutOfMemoryError: If the complex scratch arrays cannot be allocated.
    """
    x = np.asarray(samples, dtype=np.float32).ravel()
    n = next_power_of_two(x.size)

    padded = buffer.allocate(n, COMPLEX_DTYPE)
    spectrum = buffer.allocate(n, COMPLEX_DTYPE)
    padded.real[: x.size] = x

    _dit2(spectrum, padded, n, 0, 1, 0)

    return np.sqrt(spectrum.real**2 + spectrum.imag**2)
