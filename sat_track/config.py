"""Configuration objects for satellite tracking runs."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

ISS_NORAD_ID = 25544


@dataclass(frozen=True)
class TrackConfig:
    """Tracking run defaults."""

    norad_id: int = ISS_NORAD_ID
    obs_lat_deg: float = 0.0
    obs_lon_deg: float = 0.0
    obs_elev_m: float = 0.0
    http_timeout_s: float = 10.0
    celestrak_url: str = "https://celestrak.org/NORAD/elements/gp.php"
    ipinfo_url: str = "https://ipinfo.io/json"
    opentopodata_url: str = "https://api.opentopodata.org/v1/etopo1"
    pass_step_s: float = 60.0
    pass_duration_s: float = 5400.0
    log_level: str = "INFO"


def load_config(path: str | Path) -> TrackConfig:
    """Load a TrackConfig from a JSON object of overrides."""

    source = Path(path)
    overrides = json.loads(source.read_text(encoding="utf-8"))
    if not isinstance(overrides, dict):
        raise ValueError(f"{source}: config JSON must be an object")
    return config_with_overrides(TrackConfig(), overrides, source=str(source))


def config_with_overrides(
    cfg: TrackConfig,
    overrides: dict[str, Any],
    *,
    source: str = "overrides",
) -> TrackConfig:
    fields_by_name = {field.name: field for field in fields(TrackConfig)}
    cfg_kwargs: dict[str, Any] = {name: getattr(cfg, name) for name in fields_by_name}
    for key, value in overrides.items():
        if key not in fields_by_name:
            raise ValueError(f"Unknown TrackConfig override '{key}' in {source}")
        if value is None:
            continue
        cfg_kwargs[key] = value
    return TrackConfig(**cfg_kwargs)
