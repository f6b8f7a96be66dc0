from __future__ import annotations

import numpy as np
import pytest

from geonavigation.model.geodesy import WGS84_A, ecef_to_geodetic, enu_basis, geodetic_to_ecef


def test_equator_prime_meridian() -> None:
    np.testing.assert_allclose(geodetic_to_ecef(0.0, 0.0, 0.0), [WGS84_A, 0.0, 0.0], atol=1e-6)


@pytest.mark.parametrize(
    "lon, lat, alt",
    [
        (116.347, 40.0438, 0.0),
        (-73.9857, 40.7484, 381.0),
        (151.2153, -33.8568, 10.0),
        (0.0, 89.9999, 2500.0),
        (45.0, -90.0, 0.0),
    ],
)
def test_roundtrip(lon: float, lat: float, alt: float) -> None:
    lon2, lat2, alt2 = ecef_to_geodetic(geodetic_to_ecef(lon, lat, alt))
    assert lat2 == pytest.approx(lat, abs=1e-9)
    assert alt2 == pytest.approx(alt, abs=1e-4)
    if abs(lat) < 90.0:
        assert lon2 == pytest.approx(lon, abs=1e-9)


def test_enu_basis_is_orthonormal() -> None:
    basis = enu_basis(30.0, 60.0)
    np.testing.assert_allclose(basis @ basis.T, np.eye(3), atol=1e-12)


def test_enu_up_points_away_from_earth() -> None:
    up = enu_basis(10.0, 20.0)[2]
    position = geodetic_to_ecef(10.0, 20.0, 0.0)
    assert float(np.dot(up, position)) > 0.0
