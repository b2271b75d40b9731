"""Satellite position and look-angle tracking."""

from sat_track.config import TrackConfig
from sat_track.models import (
    EarthFixedVector,
    GeodeticPosition,
    GeoPrediction,
    Height,
    InertialVector,
    LengthUnit,
    LookAngle,
)
from sat_track.observer import Observer
from sat_track.transform import eci_to_geodetic, look_angle, to_earth_fixed

__all__ = [
    "EarthFixedVector",
    "GeoPrediction",
    "GeodeticPosition",
    "Height",
    "InertialVector",
    "LengthUnit",
    "LookAngle",
    "Observer",
    "TrackConfig",
    "eci_to_geodetic",
    "look_angle",
    "to_earth_fixed",
    "sat",
    "utils",
]
