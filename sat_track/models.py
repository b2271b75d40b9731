"""Core value types for satellite tracking."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

import numpy as np


class LengthUnit(Enum):
    """Linear unit carried alongside a height value."""

    METERS = "m"
    KILOMETERS = "km"


_METERS_PER_UNIT = {
    LengthUnit.METERS: 1.0,
    LengthUnit.KILOMETERS: 1_000.0,
}


@dataclass(frozen=True)
class Height:
    """Height above the reference ellipsoid, tagged with its unit."""

    value: float
    unit: LengthUnit = LengthUnit.METERS

    @classmethod
    def from_meters(cls, value: float) -> Height:
        return cls(float(value), LengthUnit.METERS)

    @classmethod
    def from_kilometers(cls, value: float) -> Height:
        return cls(float(value), LengthUnit.KILOMETERS)

    def to_meters(self) -> float:
        return self.value * _METERS_PER_UNIT[self.unit]

    def to_kilometers(self) -> float:
        return self.to_meters() / _METERS_PER_UNIT[LengthUnit.KILOMETERS]


@dataclass(frozen=True)
class InertialVector:
    """Earth-centered inertial position in kilometers."""

    x_km: float
    y_km: float
    z_km: float

    def as_array(self) -> np.ndarray:
        return np.array([self.x_km, self.y_km, self.z_km], dtype=float)


@dataclass(frozen=True)
class GeodeticPosition:
    """Geodetic longitude/latitude (deg) and unit-tagged height."""

    lon_deg: float
    lat_deg: float
    height: Height


@dataclass(frozen=True)
class EarthFixedVector:
    """Earth-centered Earth-fixed position in meters."""

    x_m: float
    y_m: float
    z_m: float

    def as_array(self) -> np.ndarray:
        return np.array([self.x_m, self.y_m, self.z_m], dtype=float)


@dataclass(frozen=True)
class LookAngle:
    """Topocentric azimuth/elevation (deg) and range (m)."""

    azimuth_deg: float
    elevation_deg: float
    range_m: float

    @property
    def range_km(self) -> float:
        return self.range_m / 1_000.0


@dataclass(frozen=True)
class GeoPrediction:
    """Propagated sub-satellite position for one instant."""

    position: GeodeticPosition
    speed_kmh: float
    gmst_rad: float


@dataclass(frozen=True)
class TrackSample:
    """One row of a sampled pass table."""

    time: datetime
    prediction: GeoPrediction
    look: LookAngle
