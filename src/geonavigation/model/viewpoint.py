"""
Viewpoint (Camera Pose) Value
=============================
The value the camera system hands to the navigation history.

Every field is optional and presence-tracked: ``None`` means "unset" and must
never be read as zero. Comparisons in ``similarity`` branch on presence first.
"""
from __future__ import annotations

import copy
import math
from dataclasses import dataclass
from typing import Optional

from geonavigation.model.units import Angle, Distance


@dataclass
class GeoPoint:
    """A geodetic point: longitude/latitude in degrees, altitude in meters."""
    lon: float
    lat: float
    alt: float = 0.0

    def __post_init__(self) -> None:
        for label, value in (("lon", self.lon), ("lat", self.lat), ("alt", self.alt)):
            if not math.isfinite(value):
                raise ValueError(f"GeoPoint.{label} must be finite, got {value!r}.")


@dataclass
class Viewpoint:
    """
    A camera pose in the 3D scene.

    Attributes:
        name: Optional label shown in the history listing.
        focal_point: The point the camera looks at.
        heading: Rotation from north, clockwise.
        pitch: Elevation of the look direction (negative = looking down).
        range: Distance from the eye to the focal point.
    """
    name: Optional[str] = None
    focal_point: Optional[GeoPoint] = None
    heading: Optional[Angle] = None
    pitch: Optional[Angle] = None
    range: Optional[Distance] = None

    @classmethod
    def from_values(
        cls,
        name: Optional[str],
        lon: float,
        lat: float,
        alt: float = 0.0,
        heading_deg: Optional[float] = None,
        pitch_deg: Optional[float] = None,
        range_m: Optional[float] = None,
    ) -> Viewpoint:
        """Build a viewpoint from plain numbers (degrees and meters)."""
        return cls(
            name=name,
            focal_point=GeoPoint(lon, lat, alt),
            heading=Angle(heading_deg) if heading_deg is not None else None,
            pitch=Angle(pitch_deg) if pitch_deg is not None else None,
            range=Distance(range_m) if range_m is not None else None,
        )

    # ---- presence ----

    @property
    def has_name(self) -> bool:
        return bool(self.name)

    @property
    def has_focal_point(self) -> bool:
        return self.focal_point is not None

    @property
    def has_heading(self) -> bool:
        return self.heading is not None

    @property
    def has_pitch(self) -> bool:
        return self.pitch is not None

    @property
    def has_range(self) -> bool:
        return self.range is not None

    def copy(self) -> Viewpoint:
        """Return an independent copy (history never aliases live camera state)."""
        return copy.deepcopy(self)
