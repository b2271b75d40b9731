"""Satellite models."""

from sat_track.sat.satellite import Satellite
from sat_track.sat.tle import Tle, load_tle_file, parse_tle

__all__ = [
    "Satellite",
    "Tle",
    "load_tle_file",
    "parse_tle",
]
