from __future__ import annotations

import math

import pytest

from geonavigation.model.units import Angle, AngleUnits, Distance, DistanceUnits
from geonavigation.model.viewpoint import GeoPoint, Viewpoint


def test_angle_conversion() -> None:
    assert Angle(180.0).radians == pytest.approx(math.pi)
    assert Angle(math.pi / 2, AngleUnits.RADIANS).degrees == pytest.approx(90.0)


def test_distance_conversion() -> None:
    assert Distance(2.5, DistanceUnits.KILOMETERS).meters == pytest.approx(2500.0)
    assert Distance(1.0, DistanceUnits.NAUTICAL_MILES).as_(DistanceUnits.METERS) == pytest.approx(1852.0)
    assert Distance(1000.0).as_(DistanceUnits.FEET) == pytest.approx(3280.8399, rel=1e-6)


def test_from_values_tracks_presence() -> None:
    vp = Viewpoint.from_values("A", 1.0, 2.0)
    assert vp.has_name and vp.has_focal_point
    assert not vp.has_heading
    assert not vp.has_pitch
    assert not vp.has_range

    vp = Viewpoint.from_values("A", 1.0, 2.0, heading_deg=0.0, pitch_deg=0.0, range_m=0.0)
    # zero is a value, not absence
    assert vp.has_heading and vp.has_pitch and vp.has_range


def test_empty_viewpoint_has_nothing_set() -> None:
    vp = Viewpoint()
    assert not (vp.has_name or vp.has_focal_point or vp.has_heading or vp.has_pitch or vp.has_range)


def test_copy_is_independent() -> None:
    vp = Viewpoint.from_values("A", 1.0, 2.0, alt=3.0)
    clone = vp.copy()
    vp.focal_point.alt = 100.0
    assert clone.focal_point.alt == 3.0
    assert clone != vp


def test_geopoint_rejects_non_finite() -> None:
    with pytest.raises(ValueError):
        GeoPoint(float("nan"), 0.0)
    with pytest.raises(ValueError):
        GeoPoint(0.0, 0.0, float("inf"))
