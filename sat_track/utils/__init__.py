"""Geometry and logging utilities.

NOTE: Keep this package lightweight.
Avoid importing heavy/optional dependencies (matplotlib, requests, sgp4) at import time.
"""

from sat_track.utils.angles import look_angle_ecef, normalize_angle_rad, wrap_longitude_rad
from sat_track.utils.logging import get_logger
from sat_track.utils.wgs84 import WGS84, Ellipsoid, ecef_to_lla, lla_to_ecef, solve_ellipsoid

__all__ = [
    "WGS84",
    "Ellipsoid",
    "ecef_to_lla",
    "get_logger",
    "lla_to_ecef",
    "look_angle_ecef",
    "normalize_angle_rad",
    "solve_ellipsoid",
    "wrap_longitude_rad",
]
