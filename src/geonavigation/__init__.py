"""Back/forward camera viewpoint navigation for 3D geospatial viewers."""
from geonavigation.controller.navigation import NavigationHistory
from geonavigation.controller.presentation import HistoryItem, format_viewpoint_info
from geonavigation.model.units import Angle, AngleUnits, Distance, DistanceUnits
from geonavigation.model.viewpoint import GeoPoint, Viewpoint

__all__ = [
    "NavigationHistory",
    "HistoryItem",
    "format_viewpoint_info",
    "Angle",
    "AngleUnits",
    "Distance",
    "DistanceUnits",
    "GeoPoint",
    "Viewpoint",
]
