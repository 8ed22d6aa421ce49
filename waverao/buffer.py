"""Growable float32 sample buffer.

A buffer is an explicit (backing storage, logical length) pair. Growing it
always zero-fills the new tail, so no stage ever reads stale samples.
"""

import sys

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from .exceptions import OutOfMemoryError, SizeOverflowError

# Largest logical length a buffer may hold
MAX_BUFFER_LENGTH = sys.maxsize

SAMPLE_DTYPE = np.float32


def allocate(length: int, dtype: DTypeLike = SAMPLE_DTYPE) -> NDArray:
    """Allocate a zeroed array, reporting failure as OutOfMemoryError.

    Args:
        length: Number of elements.
        dtype: Element type (default float32).

    Returns:
        Zero-initialised array of the requested length.

    Raises:
        ValueError: If ``length`` is negative.
        OutOfMemoryError: If the allocation cannot be satisfied.
    """
    if length < 0:
        raise ValueError(f"Length must be non-negative, got {length}")

    try:
        return np.zeros(length, dtype=dtype)
    except (MemoryError, ValueError) as exc:
        # numpy raises ValueError for sizes it cannot even describe
        raise OutOfMemoryError(
            f"Could not allocate {length} elements of {np.dtype(dtype).name}. "
            "Try reducing the amount of input data."
        ) from exc


class NumericBuffer:
    """Owned, growable sequence of float32 samples.

    ``length`` is the number of logically valid samples, which is not
    necessarily the size of the backing storage.

    The buffer can be used as a context manager; leaving the ``with`` block
    releases it, including when an exception propagates.
    """

    def __init__(self) -> None:
        self._storage: NDArray[np.float32] = np.empty(0, dtype=SAMPLE_DTYPE)
        self._length = 0

    @classmethod
    def empty(cls) -> "NumericBuffer":
        """Create a zero-length buffer."""
        return cls()

    @classmethod
    def from_values(cls, values: ArrayLike) -> "NumericBuffer":
        """Create a buffer holding an owned float32 copy of ``values``."""
        data = np.asarray(values, dtype=SAMPLE_DTYPE).ravel()
        buf = cls()
        buf._storage = allocate(data.size)
        buf._storage[:] = data
        buf._length = data.size
        return buf

    @property
    def length(self) -> int:
        """Number of valid samples."""
        return self._length

    @property
    def capacity(self) -> int:
        """Size of the backing storage."""
        return self._storage.size

    @property
    def values(self) -> NDArray[np.float32]:
        """Writable view of the valid samples."""
        return self._storage[: self._length]

    def extend_to(self, new_length: int) -> None:
        """Grow the buffer to ``new_length``, zero-filling the new tail.

        Does nothing if ``new_length`` is not larger than the current length.

        Raises:
            SizeOverflowError: If ``new_length`` exceeds MAX_BUFFER_LENGTH.
            OutOfMemoryError: If the storage cannot be grown. The buffer is
                left empty.
        """
        if new_length <= self._length:
            return

        if new_length > MAX_BUFFER_LENGTH:
            raise SizeOverflowError(
                f"Cannot extend buffer to {new_length} samples "
                f"(maximum is {MAX_BUFFER_LENGTH})"
            )

        try:
            storage = allocate(new_length)
        except OutOfMemoryError:
            self.release()
            raise

        storage[: self._length] = self._storage[: self._length]
        self._storage = storage
        self._length = new_length

    def release(self) -> None:
        """Drop the backing storage. Safe to call more than once."""
        self._storage = np.empty(0, dtype=SAMPLE_DTYPE)
        self._length = 0

    def copy(self) -> "NumericBuffer":
        """Return an independent buffer with the same samples."""
        return NumericBuffer.from_values(self.values)

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index):
        return self.values[index]

    def __array__(self, dtype=None, copy=None):
        dtype = SAMPLE_DTYPE if dtype is None else np.dtype(dtype)
        if copy:
            return self.values.astype(dtype)
        if dtype != SAMPLE_DTYPE:
            if copy is False:
                raise ValueError(
                    f"Cannot view NumericBuffer as {np.dtype(dtype).name} without a copy"
                )
            return self.values.astype(dtype)
        return self.values

    def __enter__(self) -> "NumericBuffer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __repr__(self) -> str:
        return f"NumericBuffer(length={self._length})"
