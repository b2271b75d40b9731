"""Angle utilities for tracking geometry."""

from __future__ import annotations

import math

import numpy as np

TWO_PI = 2.0 * math.pi


def normalize_angle_rad(angle_rad: float) -> float:
    """Reduce an angle into [0, 2*pi)."""

    reduced = math.fmod(angle_rad, TWO_PI)
    if reduced < 0.0:
        reduced += TWO_PI
    # fmod of a tiny negative value can round back up to exactly 2*pi.
    if reduced >= TWO_PI:
        reduced = 0.0
    return reduced


def wrap_longitude_rad(angle_rad: float) -> float:
    """Wrap an angle into (-pi, pi]."""

    wrapped = math.remainder(angle_rad, TWO_PI)
    if wrapped <= -math.pi:
        wrapped += TWO_PI
    return wrapped


def look_angle_ecef(observer_ecef_m: np.ndarray, target_ecef_m: np.ndarray) -> tuple[float, float, float]:
    """Compute azimuth, elevation (deg) and range from observer to target.

    Elevation is measured from the plane normal to the geocentric observer
    vector. Coincident points report (0, 90, 0). An observer on the polar axis
    has no defined azimuth and reports 0.

    Returns:
        (azimuth_deg, elevation_deg, range) with range in the input unit.
    """

    x, y, z = (float(v) for v in observer_ecef_m)
    dx, dy, dz = (float(t) - float(o) for t, o in zip(target_ecef_m, observer_ecef_m))

    dist_sq = dx**2 + dy**2 + dz**2
    if dist_sq == 0.0:
        return 0.0, 90.0, 0.0
    distance = math.sqrt(dist_sq)

    obs_sq = x**2 + y**2 + z**2
    cos_zenith = (x * dx + y * dy + z * dz) / math.sqrt(obs_sq * dist_sq)
    elevation = 90.0 - math.degrees(math.acos(float(np.clip(cos_zenith, -1.0, 1.0))))

    horiz_sq = x**2 + y**2
    if horiz_sq == 0.0:
        return 0.0, elevation, distance

    sin_azimuth = (-y * dx + x * dy) / math.sqrt(horiz_sq * dist_sq)
    cos_azimuth = (-z * x * dx - z * y * dy + horiz_sq * dz) / math.sqrt(obs_sq * horiz_sq * dist_sq)
    azimuth = math.degrees(math.atan2(sin_azimuth, cos_azimuth))
    if azimuth < 0.0:
        azimuth += 360.0
    # -tiny + 360 rounds to 360.0 in floating point.
    if azimuth >= 360.0:
        azimuth = 0.0
    return azimuth, elevation, distance
