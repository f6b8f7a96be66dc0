"""
WGS84 Geodesy Helpers
=====================
Conversions between geodetic coordinates (lon/lat in degrees, altitude in
meters) and Earth-Centred Earth-Fixed (ECEF) cartesian coordinates, plus the
local East-North-Up frame used to express camera headings and pitches.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import math
import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

# WGS84 ellipsoid
WGS84_A: float = 6378137.0
WGS84_F: float = 1.0 / 298.257223563
WGS84_E2: float = WGS84_F * (2.0 - WGS84_F)

_ITERATIONS = 8


def _prime_vertical_radius(sin_lat: float) -> float:
    return WGS84_A / math.sqrt(1.0 - WGS84_E2 * sin_lat * sin_lat)


def geodetic_to_ecef(lon: float, lat: float, alt: float = 0.0) -> npt.NDArray[np.float64]:
    """
    Convert geodetic coordinates to ECEF.

    Args:
        lon: Longitude in degrees.
        lat: Latitude in degrees.
        alt: Height above the ellipsoid in meters.

    Returns:
        Array (x, y, z) in meters.
    """
    lam = math.radians(lon)
    phi = math.radians(lat)
    sin_phi = math.sin(phi)
    cos_phi = math.cos(phi)
    n = _prime_vertical_radius(sin_phi)

    return np.array([
        (n + alt) * cos_phi * math.cos(lam),
        (n + alt) * cos_phi * math.sin(lam),
        (n * (1.0 - WGS84_E2) + alt) * sin_phi,
    ], dtype=np.float64)


def ecef_to_geodetic(xyz: npt.ArrayLike) -> tuple[float, float, float]:
    """
    Convert ECEF coordinates to geodetic (lon, lat in degrees, alt in meters).

    Uses the fixed-point iteration on latitude in the form
    ``lat = atan2(z + e2 * N * sin(lat), p)`` which stays well conditioned at
    the poles (unlike dividing by ``cos(lat)``).
    """
    x, y, z = (float(v) for v in np.asarray(xyz, dtype=np.float64).reshape(3))
    lon = math.atan2(y, x)
    p = math.hypot(x, y)

    lat = math.atan2(z, p * (1.0 - WGS84_E2))
    for _ in range(_ITERATIONS):
        n = _prime_vertical_radius(math.sin(lat))
        lat = math.atan2(z + WGS84_E2 * n * math.sin(lat), p)

    sin_lat = math.sin(lat)
    n = _prime_vertical_radius(sin_lat)
    alt = p * math.cos(lat) + z * sin_lat - n * (1.0 - WGS84_E2 * sin_lat * sin_lat)

    return math.degrees(lon), math.degrees(lat), alt


def enu_basis(lon: float, lat: float) -> npt.NDArray[np.float64]:
    """
    Local East-North-Up unit vectors at (lon, lat), expressed in ECEF.

    Returns:
        (3, 3) array whose rows are east, north and up.
    """
    lam = math.radians(lon)
    phi = math.radians(lat)
    sl, cl = math.sin(lam), math.cos(lam)
    sp, cp = math.sin(phi), math.cos(phi)

    return np.array([
        [-sl, cl, 0.0],
        [-sp * cl, -sp * sl, cp],
        [cp * cl, cp * sl, sp],
    ], dtype=np.float64)
