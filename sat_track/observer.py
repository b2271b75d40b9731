"""Ground observer description."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from sat_track.config import TrackConfig
from sat_track.models import GeodeticPosition, Height


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Observer:
    """Observer location (deg, m above the ellipsoid) and observation time."""

    lat_deg: float = 0.0
    lon_deg: float = 0.0
    elev_m: float = 0.0
    time: datetime = field(default_factory=_utc_now)

    @classmethod
    def from_lat_lon(cls, lat_deg: float, lon_deg: float) -> Observer:
        return cls(lat_deg=float(lat_deg), lon_deg=float(lon_deg))

    @classmethod
    def from_ip(cls, cfg: TrackConfig | None = None) -> Observer:
        """Locate the observer from this host's public IP and terrain elevation."""

        from sat_track.web import locate_by_ip, lookup_elevation

        lat, lon = locate_by_ip(cfg)
        elev = lookup_elevation(lat, lon, cfg)
        return cls(lat_deg=lat, lon_deg=lon, elev_m=elev)

    def with_elevation(self, elev_m: float) -> Observer:
        return replace(self, elev_m=float(elev_m))

    def with_time(self, time: datetime) -> Observer:
        if time.tzinfo is None:
            raise ValueError("Observation time must be timezone-aware")
        return replace(self, time=time)

    def with_current_time(self) -> Observer:
        return self.with_time(_utc_now())

    def position(self) -> GeodeticPosition:
        return GeodeticPosition(
            lon_deg=self.lon_deg,
            lat_deg=self.lat_deg,
            height=Height.from_meters(self.elev_m),
        )
