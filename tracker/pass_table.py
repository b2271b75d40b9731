"""Sample prediction and look angle over a time window."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from pathlib import Path

from sat_track.logger import save_track_csv, save_track_npz
from sat_track.models import TrackSample
from sat_track.observer import Observer
from sat_track.sat import Satellite

logger = logging.getLogger(__name__)


def sample_track(
    satellite: Satellite,
    observer: Observer,
    *,
    start: datetime,
    duration_s: float,
    step_s: float,
) -> list[TrackSample]:
    """Return one sample every ``step_s`` seconds from ``start`` through ``start + duration_s``."""

    if step_s <= 0.0:
        raise ValueError("step_s must be > 0")
    if duration_s < 0.0:
        raise ValueError("duration_s must be >= 0")

    samples: list[TrackSample] = []
    n_steps = int(duration_s // step_s)
    for k in range(n_steps + 1):
        t = start + timedelta(seconds=k * step_s)
        prediction, look = satellite.look(observer.with_time(t))
        samples.append(TrackSample(time=t, prediction=prediction, look=look))
    return samples


def visible_windows(samples: list[TrackSample], *, elevation_mask_deg: float = 0.0) -> list[tuple[datetime, datetime]]:
    """Group consecutive samples at or above the elevation mask into (start, end) windows."""

    windows: list[tuple[datetime, datetime]] = []
    start: datetime | None = None
    last: datetime | None = None
    for sample in samples:
        if sample.look.elevation_deg >= elevation_mask_deg:
            if start is None:
                start = sample.time
            last = sample.time
        elif start is not None and last is not None:
            windows.append((start, last))
            start = None
    if start is not None and last is not None:
        windows.append((start, last))
    return windows


def run_pass_table(
    satellite: Satellite,
    observer: Observer,
    out_dir: str | Path,
    *,
    start: datetime,
    duration_s: float,
    step_s: float,
    save_figs: bool = True,
) -> Path:
    """Sample a window, write track.csv/track.npz (and plots) and return the CSV path."""

    output_dir = Path(out_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    samples = sample_track(satellite, observer, start=start, duration_s=duration_s, step_s=step_s)

    csv_path = output_dir / "track.csv"
    save_track_csv(csv_path, samples)
    save_track_npz(output_dir / "track.npz", samples)
    if save_figs:
        from sat_track.plots import save_track_plots

        save_track_plots(samples, out_dir=output_dir)

    windows = visible_windows(samples)
    logger.info("Wrote %d samples to %s (%d visible window(s))", len(samples), csv_path, len(windows))
    for begin, end in windows:
        logger.info("Visible %s -> %s", begin.isoformat(), end.isoformat())
    return csv_path
