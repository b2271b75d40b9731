"""Plotting utilities for sampled track outputs."""

from __future__ import annotations

from pathlib import Path

import matplotlib
import numpy as np

from sat_track.models import TrackSample

matplotlib.use("Agg", force=True)
import matplotlib.pyplot as plt  # noqa: E402


def save_track_plots(samples: list[TrackSample], *, out_dir: str | Path) -> Path:
    """Save ground-track and look-angle figures to an output directory."""

    output_dir = Path(out_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    lon = np.array([s.prediction.position.lon_deg for s in samples], dtype=float)
    lat = np.array([s.prediction.position.lat_deg for s in samples], dtype=float)
    az = np.array([s.look.azimuth_deg for s in samples], dtype=float)
    el = np.array([s.look.elevation_deg for s in samples], dtype=float)
    minutes = _elapsed_minutes(samples)

    _plot_ground_track(lon, lat, output_dir / "ground_track.png")
    _plot_look_angles(minutes, az, el, output_dir / "look_angles.png")
    return output_dir


def _elapsed_minutes(samples: list[TrackSample]) -> np.ndarray:
    if not samples:
        return np.array([], dtype=float)
    start = samples[0].time
    return np.array([(s.time - start).total_seconds() / 60.0 for s in samples], dtype=float)


def _break_at_dateline(lon: np.ndarray, lat: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    lon = lon.copy()
    lat = lat.copy()
    jumps = np.where(np.abs(np.diff(lon)) > 180.0)[0] + 1
    return np.insert(lon, jumps, np.nan), np.insert(lat, jumps, np.nan)


def _plot_ground_track(lon: np.ndarray, lat: np.ndarray, path: Path) -> None:
    lon_plot, lat_plot = _break_at_dateline(lon, lat)
    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(lon_plot, lat_plot)
    if lon.size:
        ax.scatter(lon[:1], lat[:1], marker="o", label="start")
        ax.legend(loc="lower left")
    ax.set_xlim(-180.0, 180.0)
    ax.set_ylim(-90.0, 90.0)
    ax.set_xlabel("Longitude (deg)")
    ax.set_ylabel("Latitude (deg)")
    ax.grid(True, linestyle="--", alpha=0.5)
    ax.set_title("Ground Track")
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)


def _plot_look_angles(minutes: np.ndarray, az: np.ndarray, el: np.ndarray, path: Path) -> None:
    fig, axes = plt.subplots(2, 1, figsize=(8, 6), sharex=True)
    axes[0].plot(minutes, az)
    axes[0].set_ylabel("Azimuth (deg)")
    axes[0].set_ylim(0.0, 360.0)
    axes[1].plot(minutes, el)
    axes[1].axhline(0.0, color="k", linewidth=0.8)
    axes[1].set_ylabel("Elevation (deg)")
    axes[1].set_xlabel("Time (min)")
    for ax in axes:
        ax.grid(True, linestyle="--", alpha=0.5)
    fig.suptitle("Look Angles")
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
