"""Command line interface for wave spectrum estimation."""

from collections.abc import Callable
from functools import wraps
from pathlib import Path
from typing import Any

import typer

from .core import run_estimation
from .exceptions import WaveRAOError
from .types import EstimationConfig, WaveSpectrum

MAX_REPORT_LINES = 9

app = typer.Typer(add_completion=False, help="Wave spectrum estimation from ship heave motion.")


def _echo_error(message: str) -> None:
    typer.echo(f"Error: {message}", err=True)


def handle_cli_exceptions(func: Callable[..., Any]) -> Callable[..., Any]:
    """Turn pipeline failures into a one-line error and exit code 1."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (typer.BadParameter, typer.Exit, KeyboardInterrupt):
            raise
        except (WaveRAOError, OSError, ValueError) as exc:
            _echo_error(str(exc))

        raise typer.Exit(code=1)

    return wrapper


def format_report(spectrum: WaveSpectrum, max_lines: int = MAX_REPORT_LINES) -> list[str]:
    """Summarise the one-sided spectrum in at most ``max_lines`` evenly spaced lines."""
    freqs, S = spectrum.one_sided()
    maximum_index = spectrum.n_bins // 2

    interval = 1
    if maximum_index > max_lines:
        interval = maximum_index // (max_lines - 1)

    lines = ["Wave spectrum: (frequency, wave energy spectral density)"]
    for i in range(0, maximum_index + 1, interval):
        lines.append(f"{freqs[i]:f} Hz, {S[i]:f}")
    return lines


@app.command()  # type: ignore[misc]
@handle_cli_exceptions
def main(
    heave_displacement: Path = typer.Option(
        Path("testingHeave.csv"), "--heave-displacement", "-d",
        help="Heave displacement test measurements.",
    ),
    heave_uncertainty: float = typer.Option(
        0.1, "--heave-uncertainty", "-D", help="Heave measurement uncertainty."
    ),
    wave_elevation: Path = typer.Option(
        Path("testingWaveElevation.csv"), "--wave-elevation", "-e",
        help="Wave elevation test measurements.",
    ),
    elevation_uncertainty: float = typer.Option(
        0.1, "--elevation-uncertainty", "-E", help="Wave elevation measurement uncertainty."
    ),
    heave_acceleration: Path = typer.Option(
        Path("oceanHeaveAcceleration.csv"), "--heave-acceleration", "-a",
        help="Heave acceleration measurements taken at sea.",
    ),
    accelerometer_resolution: float = typer.Option(
        0.1, "--accelerometer-resolution", "-A", help="Accelerometer resolution."
    ),
    timestep: float = typer.Option(
        0.1, "--timestep", "-t", help="Time between successive measurements (s)."
    ),
    seed: int | None = typer.Option(None, "--seed", help="Seed for uncertainty sampling."),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write the one-sided spectrum to this CSV file."
    ),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Increase verbosity."),
) -> None:
    """Estimate a wave energy spectrum from ship heave measurements."""
    config = EstimationConfig(
        heave_displacement_path=heave_displacement,
        heave_uncertainty=heave_uncertainty,
        wave_elevation_path=wave_elevation,
        elevation_uncertainty=elevation_uncertainty,
        heave_acceleration_path=heave_acceleration,
        accelerometer_resolution=accelerometer_resolution,
        timestep=timestep,
        seed=seed,
    )

    spectrum = run_estimation(config, verbose=verbose)

    for line in format_report(spectrum):
        typer.echo(line)

    if output is not None:
        spectrum.to_dataframe().to_csv(output)
        typer.echo(f"Wrote spectrum to {output}")


if __name__ == "__main__":  # pragma: no cover
    app()
