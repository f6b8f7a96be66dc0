"""
Camera <-> Viewpoint Adapter
Translates between a PyVista camera in an ECEF scene (meters) and the
geodetic Viewpoint values kept by the navigation history.
"""
from __future__ import annotations

import logging
import math
from typing import Callable, Optional, TYPE_CHECKING

import numpy as np
import pyvista as pv

from geonavigation.model.geodesy import ecef_to_geodetic, enu_basis, geodetic_to_ecef
from geonavigation.model.units import Angle, AngleUnits, Distance, DistanceUnits
from geonavigation.model.viewpoint import GeoPoint, Viewpoint

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

_EPS = 1e-9
_VERTICAL_EPS = 1e-6


def _look_direction_enu(heading_deg: float, pitch_deg: float) -> npt.NDArray[np.float64]:
    """Unit look vector (eye -> focal point) in the local ENU frame."""
    h = math.radians(heading_deg)
    p = math.radians(pitch_deg)
    return np.array([math.cos(p) * math.sin(h), math.cos(p) * math.cos(h), math.sin(p)])


def _view_up_enu(heading_deg: float, pitch_deg: float) -> npt.NDArray[np.float64]:
    """Camera up vector in ENU, orthogonal to the look direction."""
    h = math.radians(heading_deg)
    p = math.radians(pitch_deg)
    return np.array([-math.sin(p) * math.sin(h), -math.sin(p) * math.cos(h), math.cos(p)])


def viewpoint_from_camera(camera: pv.Camera, name: Optional[str] = None) -> Viewpoint:
    """
    Read the camera pose as a geodetic viewpoint.

    Args:
        camera: A PyVista camera whose scene coordinates are ECEF meters.
        name: Optional label for the viewpoint.

    Returns:
        A fully populated Viewpoint (focal point, heading, pitch, range).

    Raises:
        ValueError: If the camera eye coincides with the focal point.
    """
    focal = np.asarray(camera.focal_point, dtype=np.float64)
    eye = np.asarray(camera.position, dtype=np.float64)

    look = focal - eye
    distance = float(np.linalg.norm(look))
    if distance < _EPS:
        raise ValueError("Camera position coincides with its focal point; range is undefined.")

    lon, lat, alt = ecef_to_geodetic(focal)
    basis = enu_basis(lon, lat)
    east, north, up = basis @ (look / distance)

    if math.hypot(east, north) < _VERTICAL_EPS:
        # looking straight down or up: the heading lives in the view-up vector
        up_e, up_n, _ = basis @ np.asarray(camera.up, dtype=np.float64)
        sign = 1.0 if up < 0.0 else -1.0
        heading = math.degrees(math.atan2(sign * up_e, sign * up_n)) % 360.0
    else:
        heading = math.degrees(math.atan2(east, north)) % 360.0
    pitch = math.degrees(math.asin(max(-1.0, min(1.0, up))))

    return Viewpoint(
        name=name,
        focal_point=GeoPoint(lon, lat, alt),
        heading=Angle(heading),
        pitch=Angle(pitch),
        range=Distance(distance),
    )


def apply_viewpoint(camera: pv.Camera, viewpoint: Viewpoint) -> None:
    """
    Move the camera to ``viewpoint``.

    Unset fields keep the camera's current value, so a viewpoint holding
    only a focal point re-centres without changing orientation or zoom.
    """
    complete = viewpoint.has_focal_point and viewpoint.has_heading and viewpoint.has_pitch and viewpoint.has_range
    current = viewpoint if complete else viewpoint_from_camera(camera)

    focal_point = viewpoint.focal_point if viewpoint.has_focal_point else current.focal_point
    heading = (viewpoint.heading if viewpoint.has_heading else current.heading).as_(AngleUnits.DEGREES)
    pitch = (viewpoint.pitch if viewpoint.has_pitch else current.pitch).as_(AngleUnits.DEGREES)
    distance = (viewpoint.range if viewpoint.has_range else current.range).as_(DistanceUnits.METERS)

    focal = geodetic_to_ecef(focal_point.lon, focal_point.lat, focal_point.alt)
    basis = enu_basis(focal_point.lon, focal_point.lat)

    # rows of basis are ENU axes in ECEF -> transpose maps ENU to ECEF
    look = basis.T @ _look_direction_enu(heading, pitch)
    view_up = basis.T @ _view_up_enu(heading, pitch)

    camera.focal_point = tuple(focal)
    camera.position = tuple(focal - distance * look)
    camera.up = tuple(view_up)
    logger.debug(f"Camera moved to {viewpoint.name!r} (lon={focal_point.lon:.6f}, lat={focal_point.lat:.6f}).")


def camera_feed(plotter: pv.Plotter, name: Optional[str] = None) -> Callable[[], Viewpoint]:
    """Provider for ViewpointRecorder: reads the plotter's camera on demand."""
    return lambda: viewpoint_from_camera(plotter.camera, name=name)


def fly_to(plotter: pv.Plotter, viewpoint: Viewpoint) -> None:
    """Move the plotter's camera to ``viewpoint`` and redraw (slot for viewpoint_requested)."""
    apply_viewpoint(plotter.camera, viewpoint)
    plotter.reset_camera_clipping_range()
    plotter.render()
