"""Loading measurement records from text files.

Records are plain text files of floats separated by commas and/or whitespace,
for example ``0.12,0.15,0.11,`` on one line or one value per line. A trailing
separator is allowed. Samples are taken row by row, so a later row may be
shorter than the first but not wider.
"""

from pathlib import Path

import numpy as np
import pandas as pd
from numpy.typing import NDArray

from .exceptions import EmptySourceError, MalformedSourceError, SourceNotFoundError


def load_samples(source: str | Path) -> NDArray[np.float32]:
    """Read an ordered series of samples from a CSV-style file.

    Args:
        source: Path to the file.

    Returns:
        float32 array of the samples in file order.

    Raises:
        SourceNotFoundError: If the file does not exist.
        EmptySourceError: If the file holds no values.
        MalformedSourceError: If the file is not UTF-8 text or any field is
            not a number.
    """
    path = Path(source)
    if not path.is_file():
        raise SourceNotFoundError(f"Could not open file at path '{path}'")

    try:
        df = pd.read_csv(
            path,
            sep=r"[,\s]+",
            header=None,
            engine="python",
            dtype=np.float32,
            encoding="utf-8",
        )
    except pd.errors.EmptyDataError as exc:
        raise EmptySourceError(f"No data found in the specified file ('{path}')") from exc
    except ValueError as exc:
        # ParserError and UnicodeDecodeError are both ValueErrors
        raise MalformedSourceError(
            f"Failed to read data from file at path '{path}': {exc}"
        ) from exc

    samples = df.to_numpy(dtype=np.float32).ravel()
    # Trailing separators and short rows leave NaN padding
    samples = samples[~np.isnan(samples)]
    if samples.size == 0:
        raise EmptySourceError(f"No data found in the specified file ('{path}')")

    return samples
