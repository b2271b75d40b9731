"""WGS-84 coordinate utilities."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Ellipsoid:
    """Reference ellipsoid constants."""

    a: float = 6_378_137.0
    f: float = 1.0 / 298.257223563

    @property
    def b(self) -> float:
        return self.a * (1.0 - self.f)

    @property
    def a_sq(self) -> float:
        return self.a**2

    @property
    def b_sq(self) -> float:
        return self.b**2

    @property
    def e2(self) -> float:
        return self.f * (2.0 - self.f)

    @property
    def ep2(self) -> float:
        return (self.a_sq - self.b_sq) / self.b_sq


WGS84 = Ellipsoid()


def lla_to_ecef(
    lon_deg: float,
    lat_deg: float,
    alt_m: float,
    *,
    ellipsoid: Ellipsoid = WGS84,
) -> np.ndarray:
    """Convert geodetic longitude/latitude/altitude to ECEF.

    Args:
        lon_deg: Longitude in degrees.
        lat_deg: Latitude in degrees.
        alt_m: Altitude above the ellipsoid in meters.

    Returns:
        ECEF position (x, y, z) in meters.
    """

    lat = np.deg2rad(lat_deg)
    lon = np.deg2rad(lon_deg)
    sin_lat = np.sin(lat)
    cos_lat = np.cos(lat)

    n = ellipsoid.a / np.sqrt(1.0 - ellipsoid.e2 * sin_lat**2)
    x = (n + alt_m) * np.cos(lon) * cos_lat
    y = (n + alt_m) * np.sin(lon) * cos_lat
    z = ((1.0 - ellipsoid.e2) * n + alt_m) * sin_lat
    return np.array([x, y, z], dtype=float)


def solve_ellipsoid(
    r_m: float,
    z_m: float,
    *,
    ellipsoid: Ellipsoid = WGS84,
) -> tuple[float, float]:
    """Closed-form geodetic latitude and height from meridian-plane coordinates.

    Non-iterative ECEF to geodetic solution (Heikkinen / Zhu). ``r_m`` is the
    distance from the polar axis and ``z_m`` the polar-axis coordinate, both in
    meters.

    Returns:
        (lat_deg, alt_m)
    """

    a_sq = ellipsoid.a_sq
    b_sq = ellipsoid.b_sq
    e2 = ellipsoid.e2
    r_sq = r_m**2
    z_sq = z_m**2

    ee_sq = a_sq - b_sq
    ff = 54.0 * b_sq * z_sq
    gg = r_sq + (1.0 - e2) * z_sq - e2 * ee_sq
    cc = e2**2 * ff * r_sq / gg**3
    ss = np.cbrt(1.0 + cc + np.sqrt(cc**2 + 2.0 * cc))
    pp = ff / (3.0 * (ss + 1.0 / ss + 1.0) ** 2 * gg**2)
    qq = np.sqrt(1.0 + 2.0 * e2**2 * pp)
    # Exactly zero on the polar axis, where rounding can push it negative.
    r0_sq = max(
        0.5 * a_sq * (1.0 + 1.0 / qq) - pp * (1.0 - e2) * z_sq / (qq * (1.0 + qq)) - 0.5 * pp * r_sq,
        0.0,
    )
    r0 = -(pp * e2 * r_m) / (1.0 + qq) + np.sqrt(r0_sq)
    uu = np.sqrt((r_m - e2 * r0) ** 2 + z_sq)
    vv = np.sqrt((r_m - e2 * r0) ** 2 + (1.0 - e2) * z_sq)

    # z0 / z == b^2 / (a * vv); using the ratio keeps the equatorial plane finite.
    z0_over_z = b_sq / (ellipsoid.a * vv)
    alt_m = uu * (1.0 - z0_over_z)
    if z_m == 0.0:
        return 0.0, float(alt_m)

    z0 = z0_over_z * z_m
    lat = np.arctan2(z_m + ellipsoid.ep2 * z0, r_m)
    return float(np.rad2deg(lat)), float(alt_m)


def ecef_to_lla(
    x_m: float,
    y_m: float,
    z_m: float,
    *,
    ellipsoid: Ellipsoid = WGS84,
) -> tuple[float, float, float]:
    """Convert ECEF to geodetic longitude/latitude/altitude.

    Returns:
        (lon_deg, lat_deg, alt_m)
    """

    lon = np.arctan2(y_m, x_m)
    lat_deg, alt_m = solve_ellipsoid(float(np.hypot(x_m, y_m)), z_m, ellipsoid=ellipsoid)
    return (float(np.rad2deg(lon)), lat_deg, alt_m)
