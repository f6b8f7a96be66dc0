"""
The MODEL layer contains pure data structures and navigation logic.
It has NO knowledge of the GUI (Qt) or the Visualization (PyVista).
It deals with Viewpoints, their comparison, and the bounded history stacks.
"""
from geonavigation.model.units import Angle, AngleUnits, Distance, DistanceUnits
from geonavigation.model.viewpoint import GeoPoint, Viewpoint

__all__ = ["Angle", "AngleUnits", "Distance", "DistanceUnits", "GeoPoint", "Viewpoint"]
