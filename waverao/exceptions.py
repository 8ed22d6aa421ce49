"""Exception types raised by waverao.

Each error derives from the matching builtin so callers that only know about
``ValueError``/``MemoryError``/``OverflowError`` still catch it.
"""


class WaveRAOError(Exception):
    """Base class for all waverao errors."""


class OutOfMemoryError(WaveRAOError, MemoryError):
    """A buffer or scratch array could not be allocated."""


class SizeOverflowError(WaveRAOError, OverflowError):
    """A requested length cannot be represented as a buffer length."""


class LengthMismatchError(WaveRAOError, ValueError):
    """Two series that must be combined elementwise differ in length.

    Attributes:
        lengths: The two offending lengths, in argument order.
    """

    def __init__(self, message: str, first: int, second: int):
        super().__init__(message)
        self.lengths = (first, second)


class IngestionError(WaveRAOError):
    """Samples could not be loaded from a source."""


class SourceNotFoundError(IngestionError, FileNotFoundError):
    """The sample source does not exist."""


class EmptySourceError(IngestionError, ValueError):
    """The sample source holds no values."""


class MalformedSourceError(IngestionError, ValueError):
    """The sample source holds a value that is not a number."""
