"""Angular and linear quantities carried by a Viewpoint."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class AngleUnits(StrEnum):
    DEGREES = "deg"
    RADIANS = "rad"


class DistanceUnits(StrEnum):
    METERS = "m"
    KILOMETERS = "km"
    FEET = "ft"
    NAUTICAL_MILES = "nmi"


# Conversion factor to the base unit (radians / meters)
_ANGLE_TO_RAD: dict[AngleUnits, float] = {
    AngleUnits.DEGREES: math.pi / 180.0,
    AngleUnits.RADIANS: 1.0,
}

_DISTANCE_TO_M: dict[DistanceUnits, float] = {
    DistanceUnits.METERS: 1.0,
    DistanceUnits.KILOMETERS: 1000.0,
    DistanceUnits.FEET: 0.3048,
    DistanceUnits.NAUTICAL_MILES: 1852.0,
}


# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class Angle:
    """An angle (heading or pitch) with its units."""
    value: float
    units: AngleUnits = AngleUnits.DEGREES

    def as_(self, units: AngleUnits) -> float:
        """Return the numeric value converted to the given units."""
        radians = self.value * _ANGLE_TO_RAD[AngleUnits(self.units)]
        return radians / _ANGLE_TO_RAD[AngleUnits(units)]

    @property
    def degrees(self) -> float:
        return self.as_(AngleUnits.DEGREES)

    @property
    def radians(self) -> float:
        return self.as_(AngleUnits.RADIANS)


@dataclass(frozen=True)
class Distance:
    """A length (camera range) with its units."""
    value: float
    units: DistanceUnits = DistanceUnits.METERS

    def as_(self, units: DistanceUnits) -> float:
        """Return the numeric value converted to the given units."""
        meters = self.value * _DISTANCE_TO_M[DistanceUnits(self.units)]
        return meters / _DISTANCE_TO_M[DistanceUnits(units)]

    @property
    def meters(self) -> float:
        return self.as_(DistanceUnits.METERS)
