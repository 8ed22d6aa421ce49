"""Tests for configuration and result structures."""

from pathlib import Path

import numpy as np
import pandas as pd
import pytest
import xarray as xr

from waverao import EstimationConfig, WaveSpectrum


class TestEstimationConfig:
    """Tests for EstimationConfig."""

    def test_defaults(self):
        """Defaults match the standard file names and uncertainties."""
        config = EstimationConfig()

        assert config.heave_displacement_path == Path("testingHeave.csv")
        assert config.wave_elevation_path == Path("testingWaveElevation.csv")
        assert config.heave_acceleration_path == Path("oceanHeaveAcceleration.csv")
        assert config.heave_uncertainty == 0.1
        assert config.elevation_uncertainty == 0.1
        assert config.accelerometer_resolution == 0.1
        assert config.timestep == 0.1
        assert config.seed is None

    def test_paths_coerced(self):
        """String paths are converted to Path."""
        config = EstimationConfig(heave_displacement_path="a.csv")

        assert isinstance(config.heave_displacement_path, Path)

    def test_zero_timestep(self):
        """A zero timestep is rejected."""
        with pytest.raises(ValueError, match="timestep"):
            EstimationConfig(timestep=0.0)

    def test_negative_uncertainty(self):
        """Uncertainties cannot be negative."""
        with pytest.raises(ValueError, match="accelerometer_resolution"):
            EstimationConfig(accelerometer_resolution=-0.1)


class TestWaveSpectrum:
    """Tests for WaveSpectrum."""

    @pytest.fixture
    def spectrum(self):
        S = np.array([0.0, 1.0, 2.0, 3.0, 4.0, 3.0, 2.0, 1.0], dtype=np.float32)
        rao = np.array([np.inf, 2.0, 2.0, 2.0, 2.0, 2.0, 2.0, 2.0], dtype=np.float32)
        return WaveSpectrum(S=S, rao=rao, dt=0.5)

    def test_properties(self, spectrum):
        """Frequency axis follows i / (dt * n)."""
        assert spectrum.n_bins == 8
        assert spectrum.df == pytest.approx(0.25)
        np.testing.assert_allclose(spectrum.freqs, np.arange(8) * 0.25)

    def test_one_sided(self, spectrum):
        """One-sided view covers DC through Nyquist."""
        freqs, S = spectrum.one_sided()

        assert len(freqs) == 5
        assert freqs[-1] == pytest.approx(1.0)
        np.testing.assert_array_equal(S, [0.0, 1.0, 2.0, 3.0, 4.0])

    def test_length_mismatch(self):
        """S and RAO must have the same length."""
        with pytest.raises(ValueError, match="RAO length"):
            WaveSpectrum(S=np.zeros(4), rao=np.zeros(8), dt=0.1)

    def test_to_xarray(self, spectrum):
        """xarray output carries efth and rao on the freq coordinate."""
        ds = spectrum.to_xarray()

        assert isinstance(ds, xr.Dataset)
        assert "efth" in ds.data_vars
        assert "rao" in ds.data_vars
        assert ds.sizes["freq"] == 5
        assert np.isposinf(ds["rao"].values[0])
        assert ds.attrs["n_bins"] == 8

    def test_from_xarray_restores_mirror(self, spectrum):
        """Mirror bins are rebuilt from the one-sided dataset."""
        restored = WaveSpectrum.from_xarray(spectrum.to_xarray())

        np.testing.assert_array_equal(restored.S, spectrum.S)
        np.testing.assert_array_equal(restored.rao, spectrum.rao)
        assert restored.dt == spectrum.dt

    def test_to_dataframe(self, spectrum):
        """DataFrame output is indexed by frequency."""
        df = spectrum.to_dataframe()

        assert isinstance(df, pd.DataFrame)
        assert df.index.name == "freq"
        assert list(df.columns) == ["efth", "rao"]
        assert len(df) == 5
