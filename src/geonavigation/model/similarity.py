"""
Viewpoint Equality & Similarity
===============================
Two pure predicates used by the navigation history:

* ``viewpoints_equal`` - exact identity (name + lon/lat), used for membership.
* ``is_similar_for_dedup`` - "close enough not to record again", used on push.

Altitude, heading and pitch take part in neither check.
"""
from __future__ import annotations

from geonavigation.config import (
    EQUALITY_TOLERANCE_DEG,
    SIMILARITY_RANGE_RATIO,
    SIMILARITY_TOLERANCE_DEG,
)
from geonavigation.model.viewpoint import Viewpoint


def viewpoints_equal(a: Viewpoint, b: Viewpoint) -> bool:
    """
    Exact identity check.

    True iff the names match (unset and empty are the same), focal point
    presence matches, and, when both focal points are set, lon and lat each
    differ by at most ``EQUALITY_TOLERANCE_DEG``.
    """
    if (a.name or "") != (b.name or ""):
        return False

    if a.has_focal_point != b.has_focal_point:
        return False

    if not a.has_focal_point:
        return True

    fa, fb = a.focal_point, b.focal_point
    return (
        abs(fa.lon - fb.lon) <= EQUALITY_TOLERANCE_DEG
        and abs(fa.lat - fb.lat) <= EQUALITY_TOLERANCE_DEG
    )


def is_similar_for_dedup(candidate: Viewpoint, last_recorded: Viewpoint) -> bool:
    """
    Decide whether ``candidate`` is too close to ``last_recorded`` to be worth
    recording.

    Only answers True when both focal points are set. Lon/lat must each differ
    by less than ``SIMILARITY_TOLERANCE_DEG``. When both ranges are set their
    relative difference must not exceed ``SIMILARITY_RANGE_RATIO``; a missing
    range cannot disprove similarity.
    """
    if not (candidate.has_focal_point and last_recorded.has_focal_point):
        return False

    lat_diff = abs(candidate.focal_point.lat - last_recorded.focal_point.lat)
    lon_diff = abs(candidate.focal_point.lon - last_recorded.focal_point.lon)

    range_similar = True
    if candidate.has_range and last_recorded.has_range:
        r1 = candidate.range.meters
        r2 = last_recorded.range.meters
        largest = max(r1, r2)
        if largest > 0.0:
            range_similar = abs(r1 - r2) / largest <= SIMILARITY_RANGE_RATIO
        else:
            # both zero
            range_similar = r1 == r2

    return (
        lat_diff < SIMILARITY_TOLERANCE_DEG
        and lon_diff < SIMILARITY_TOLERANCE_DEG
        and range_similar
    )
