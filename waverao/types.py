"""Type definitions and data structures for waverao.

This module defines the records passed between the pipeline and its callers:
- EstimationConfig: Run configuration (input files, uncertainties, timestep)
- WaveSpectrum: Estimated wave energy spectrum together with the RAO used
"""

from dataclasses import dataclass
from pathlib import Path

import numpy as np
import pandas as pd
import xarray as xr
from numpy.typing import NDArray

from .spectrum import bin_frequencies, frequency_resolution


@dataclass
class EstimationConfig:
    """Configuration of a wave spectrum estimation run.

    Attributes:
        heave_displacement_path: Heave displacement calibration record.
        heave_uncertainty: Heave displacement measurement uncertainty.
        wave_elevation_path: Wave elevation calibration record.
        elevation_uncertainty: Wave elevation measurement uncertainty.
        heave_acceleration_path: Heave acceleration record taken at sea.
        accelerometer_resolution: Accelerometer measurement resolution.
        timestep: Time between successive measurements in seconds.
        seed: Seed for the uncertainty sampler (None for a random seed).
    """

    heave_displacement_path: Path = Path("testingHeave.csv")
    heave_uncertainty: float = 0.1
    wave_elevation_path: Path = Path("testingWaveElevation.csv")
    elevation_uncertainty: float = 0.1
    heave_acceleration_path: Path = Path("oceanHeaveAcceleration.csv")
    accelerometer_resolution: float = 0.1
    timestep: float = 0.1
    seed: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration."""
        self.heave_displacement_path = Path(self.heave_displacement_path)
        self.wave_elevation_path = Path(self.wave_elevation_path)
        self.heave_acceleration_path = Path(self.heave_acceleration_path)

        if self.timestep == 0.0:
            raise ValueError(f"Invalid timestep value: {self.timestep}")
        for name in ("heave_uncertainty", "elevation_uncertainty", "accelerometer_resolution"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")


@dataclass
class WaveSpectrum:
    """Estimated wave energy spectrum.

    Attributes:
        S: Wave energy per frequency bin [n_bins]. Bins where the RAO is zero
            hold +inf.
        rao: Response Amplitude Operator used for the estimate [n_bins].
        dt: Time between accelerometer samples in seconds.
    """

    S: NDArray[np.float32]
    rao: NDArray[np.float32]
    dt: float

    def __post_init__(self) -> None:
        """Validate spectrum dimensions."""
        if len(self.S) != len(self.rao):
            raise ValueError(
                f"Spectrum length ({len(self.S)}) must match RAO length ({len(self.rao)})"
            )
        if self.dt == 0.0:
            raise ValueError(f"dt must be non-zero, got {self.dt}")

    @property
    def n_bins(self) -> int:
        """Number of frequency bins (including mirror bins)."""
        return len(self.S)

    @property
    def df(self) -> float:
        """Frequency resolution in Hz."""
        return frequency_resolution(self.n_bins, self.dt)

    @property
    def freqs(self) -> NDArray[np.floating]:
        """Frequency of every bin in Hz."""
        return bin_frequencies(self.n_bins, self.dt)

    def one_sided(self) -> tuple[NDArray[np.floating], NDArray[np.float32]]:
        """Bins from DC up to and including Nyquist.

        Returns:
            Tuple of (frequencies, spectrum) for bins 0..n_bins/2.
        """
        stop = self.n_bins // 2 + 1
        return self.freqs[:stop], self.S[:stop]

    def to_xarray(self) -> xr.Dataset:
        """Convert the one-sided spectrum to an xarray Dataset.

        Returns:
            Dataset with 'efth' (wave energy) and 'rao' variables on 'freq'.
        """
        freqs, S = self.one_sided()
        ds = xr.Dataset(
            {
                "efth": (["freq"], S),
                "rao": (["freq"], self.rao[: len(freqs)]),
            },
            coords={"freq": freqs},
            attrs={"dt": self.dt, "n_bins": self.n_bins},
        )
        ds["efth"].attrs["long_name"] = "Wave energy spectral density"
        ds["rao"].attrs["long_name"] = "Response amplitude operator"
        ds["freq"].attrs["units"] = "Hz"
        return ds

    @classmethod
    def from_xarray(cls, ds: xr.Dataset) -> "WaveSpectrum":
        """Rebuild a full-length WaveSpectrum from ``to_xarray`` output.

        Mirror bins are restored from the one-sided values.
        """
        n_bins = int(ds.attrs["n_bins"])
        return cls(
            S=_mirror(ds["efth"].values, n_bins),
            rao=_mirror(ds["rao"].values, n_bins),
            dt=float(ds.attrs["dt"]),
        )

    def to_dataframe(self) -> pd.DataFrame:
        """One-sided spectrum as a DataFrame indexed by frequency."""
        freqs, S = self.one_sided()
        return pd.DataFrame(
            {"efth": S, "rao": self.rao[: len(freqs)]},
            index=pd.Index(freqs, name="freq"),
        )


def _mirror(one_sided: NDArray, n_bins: int) -> NDArray[np.float32]:
    """Expand bins 0..n_bins/2 to the full symmetric spectrum."""
    full = np.empty(n_bins, dtype=np.float32)
    half = len(one_sided)
    full[:half] = one_sided
    if n_bins > half:
        full[half:] = one_sided[1 : n_bins - half + 1][::-1]
    return full
