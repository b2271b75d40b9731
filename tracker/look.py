"""Single-instant position and look-angle report."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from sat_track.config import TrackConfig
from sat_track.models import GeoPrediction, LookAngle
from sat_track.observer import Observer
from sat_track.sat import Satellite, load_tle_file
from sat_track.web import WebLookupError

logger = logging.getLogger(__name__)


def build_observer(
    cfg: TrackConfig,
    *,
    lat_deg: float | None = None,
    lon_deg: float | None = None,
    elev_m: float | None = None,
    time_text: str | None = None,
    locate: bool = True,
) -> Observer:
    """Observer from explicit coordinates, else IP geolocation, else config defaults."""

    if lat_deg is not None and lon_deg is not None:
        observer = Observer.from_lat_lon(lat_deg, lon_deg)
    elif locate:
        try:
            observer = Observer.from_ip(cfg)
        except WebLookupError as exc:
            logger.warning("Falling back to the configured observer: %s", exc)
            observer = _config_observer(cfg)
    else:
        observer = _config_observer(cfg)

    if elev_m is not None:
        observer = observer.with_elevation(elev_m)
    if time_text:
        observer = _apply_time(observer, time_text)
    return observer


def build_satellite(cfg: TrackConfig, *, norad_id: int | None = None, tle_file: str | Path | None = None) -> Satellite:
    if tle_file is not None:
        return Satellite.from_tle(load_tle_file(tle_file))
    return Satellite.from_norad_cat(norad_id if norad_id is not None else cfg.norad_id, cfg)


def format_report(
    satellite: Satellite,
    prediction: GeoPrediction,
    observer: Observer,
    look: LookAngle,
) -> list[str]:
    position = prediction.position
    return [
        repr(satellite),
        (
            f"Prediction {{ lat: {position.lat_deg:.3f} deg, lon: {position.lon_deg:.3f} deg, "
            f"alt: {position.height.to_kilometers():.3f} km, speed: {prediction.speed_kmh:.3f} km/h }}"
        ),
        (
            f"Observer {{ lat: {observer.lat_deg:.3f} deg, lon: {observer.lon_deg:.3f} deg, "
            f"elev: {observer.elev_m:.1f} m, time: {observer.time.isoformat()} }}"
        ),
        (
            f"Look {{ azimuth: {look.azimuth_deg:.3f} deg, elevation: {look.elevation_deg:.3f} deg, "
            f"range: {look.range_km:.3f} km }}"
        ),
    ]


def run_look(satellite: Satellite, observer: Observer) -> list[str]:
    prediction, look = satellite.look(observer)
    lines = format_report(satellite, prediction, observer, look)
    for line in lines:
        print(line)
    return lines


def parse_time(text: str) -> datetime:
    """Parse an RFC 3339 timestamp; a trailing 'Z' means UTC."""

    value = text.strip()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        raise ValueError(f"Timestamp '{text}' has no UTC offset")
    return parsed


def _apply_time(observer: Observer, time_text: str) -> Observer:
    try:
        return observer.with_time(parse_time(time_text))
    except ValueError as exc:
        logger.warning("Failed to parse time: %s", exc)
        return observer


def _config_observer(cfg: TrackConfig) -> Observer:
    return Observer(lat_deg=cfg.obs_lat_deg, lon_deg=cfg.obs_lon_deg, elev_m=cfg.obs_elev_m)
