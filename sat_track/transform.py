"""Inertial, geodetic and topocentric frame transforms."""

from __future__ import annotations

import math

from sat_track.models import (
    EarthFixedVector,
    GeodeticPosition,
    Height,
    InertialVector,
    LookAngle,
)
from sat_track.utils.angles import look_angle_ecef, normalize_angle_rad, wrap_longitude_rad
from sat_track.utils.wgs84 import WGS84, Ellipsoid, lla_to_ecef, solve_ellipsoid


def eci_to_geodetic(
    position: InertialVector,
    gmst_rad: float,
    *,
    ellipsoid: Ellipsoid = WGS84,
) -> GeodeticPosition:
    """Convert an inertial position (km) to geodetic coordinates.

    Args:
        position: Inertial position vector in kilometers.
        gmst_rad: Greenwich sidereal time angle in radians; need not be reduced.

    Returns:
        Geodetic position with a kilometer-tagged height.
    """

    theta = normalize_angle_rad(math.atan2(position.y_km, position.x_km))
    lon = wrap_longitude_rad(theta - normalize_angle_rad(gmst_rad))
    r_km = math.hypot(position.x_km, position.y_km)
    lat_deg, alt_m = solve_ellipsoid(r_km * 1_000.0, position.z_km * 1_000.0, ellipsoid=ellipsoid)
    return GeodeticPosition(
        lon_deg=math.degrees(lon),
        lat_deg=lat_deg,
        height=Height.from_kilometers(alt_m / 1_000.0),
    )


def to_earth_fixed(position: GeodeticPosition, *, ellipsoid: Ellipsoid = WGS84) -> EarthFixedVector:
    x, y, z = lla_to_ecef(
        position.lon_deg,
        position.lat_deg,
        position.height.to_meters(),
        ellipsoid=ellipsoid,
    )
    return EarthFixedVector(float(x), float(y), float(z))


def look_angle(
    observer: GeodeticPosition,
    target: GeodeticPosition,
    *,
    ellipsoid: Ellipsoid = WGS84,
) -> LookAngle:
    """Azimuth, elevation and range from observer to target.

    Heights are converted to meters from their own unit tags, so a target
    height in kilometers and an observer height in meters can be mixed freely.
    """

    observer_ecef = to_earth_fixed(observer, ellipsoid=ellipsoid)
    target_ecef = to_earth_fixed(target, ellipsoid=ellipsoid)
    azimuth, elevation, distance = look_angle_ecef(observer_ecef.as_array(), target_ecef.as_array())
    return LookAngle(azimuth_deg=azimuth, elevation_deg=elevation, range_m=distance)
