"""Simple logging utilities for sampled track outputs."""

from __future__ import annotations

from pathlib import Path

import numpy as np

from sat_track.models import TrackSample

TRACK_CSV_COLUMNS = [
    "time_utc",
    "lat_deg",
    "lon_deg",
    "alt_km",
    "speed_kmh",
    "gmst_rad",
    "azimuth_deg",
    "elevation_deg",
    "range_km",
    "visible",
]
_CSV_HEADER = ",".join(TRACK_CSV_COLUMNS) + "\n"


def save_track_csv(path: str | Path, samples: list[TrackSample]) -> None:
    """Save all track samples to a CSV file."""

    target = Path(path)
    target.write_text(_CSV_HEADER)
    with target.open("a", encoding="utf-8") as handle:
        for sample in samples:
            handle.write(_sample_to_csv_line(sample))


def save_track_npz(path: str | Path, samples: list[TrackSample]) -> None:
    """Save track samples as numeric columns in a compressed NPZ file."""

    rows = [_sample_to_row(sample) for sample in samples]
    np.savez_compressed(
        path,
        time_utc=np.array([row["time_utc"] for row in rows], dtype=str),
        **{
            column: np.array([row[column] for row in rows], dtype=float)
            for column in TRACK_CSV_COLUMNS
            if column != "time_utc"
        },
    )


def load_track_npz(path: str | Path) -> dict[str, np.ndarray]:
    """Load track columns from a compressed NPZ file."""

    with np.load(path) as data:
        return {column: data[column] for column in TRACK_CSV_COLUMNS}


def _sample_to_row(sample: TrackSample) -> dict[str, str | float | int]:
    position = sample.prediction.position
    return {
        "time_utc": sample.time.isoformat(),
        "lat_deg": position.lat_deg,
        "lon_deg": position.lon_deg,
        "alt_km": position.height.to_kilometers(),
        "speed_kmh": sample.prediction.speed_kmh,
        "gmst_rad": sample.prediction.gmst_rad,
        "azimuth_deg": sample.look.azimuth_deg,
        "elevation_deg": sample.look.elevation_deg,
        "range_km": sample.look.range_km,
        "visible": int(sample.look.elevation_deg >= 0.0),
    }


def _sample_to_csv_line(sample: TrackSample) -> str:
    row = _sample_to_row(sample)
    values = [row["time_utc"]] + [_format_value(row[column]) for column in TRACK_CSV_COLUMNS[1:]]
    return ",".join(str(value) for value in values) + "\n"


def _format_value(value: str | float | int) -> str:
    if isinstance(value, (str, int)):
        return str(value)
    return f"{value:.6f}"
