"""
History Presentation
====================
Turns the navigation stacks into a flat, display-ready listing and formats
one entry as text. Widgets only ever see ``HistoryItem`` values, never the
stacks themselves.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from geonavigation.config import CURRENT_VIEWPOINT_LABEL, VIEWPOINT_LABEL_TEMPLATE
from geonavigation.model.units import AngleUnits, DistanceUnits
from geonavigation.model.viewpoint import Viewpoint


@dataclass
class HistoryItem:
    """One row of the history listing."""
    viewpoint: Viewpoint
    index: int
    is_current: bool
    display_name: str


def build_history_items(
    back_oldest_first: Iterable[Viewpoint],
    current: Viewpoint,
    forward_next_first: Iterable[Viewpoint],
) -> list[HistoryItem]:
    """
    Build the chronological listing.

    Args:
        back_oldest_first: Back stack, bottom to top.
        current: The viewpoint the camera is at; always listed.
        forward_next_first: Forward stack in pop order (nearest future first).

    Returns:
        Items indexed 0..N-1. Unnamed past/future entries are labelled by their
        1-based position among the non-current entries.
    """
    items: list[HistoryItem] = []
    ordinal = 0

    def _add_recorded(viewpoint: Viewpoint) -> None:
        nonlocal ordinal
        ordinal += 1
        label = viewpoint.name if viewpoint.has_name else VIEWPOINT_LABEL_TEMPLATE.format(index=ordinal)
        items.append(HistoryItem(viewpoint.copy(), len(items), False, label))

    for vp in back_oldest_first:
        _add_recorded(vp)

    current_label = current.name if current.has_name else CURRENT_VIEWPOINT_LABEL
    items.append(HistoryItem(current.copy(), len(items), True, current_label))

    for vp in forward_next_first:
        _add_recorded(vp)

    return items


def format_viewpoint_info(item: HistoryItem) -> str:
    """Human readable summary of a listing row (name, position, orientation, range)."""
    text = "[Current] " if item.is_current else ""
    text += item.display_name

    vp = item.viewpoint
    if vp.has_focal_point:
        focal = vp.focal_point
        text += f"\n  Position: lon {focal.lon:.6f}°, lat {focal.lat:.6f}°, alt {focal.alt:.2f}m"

    if vp.has_heading:
        text += f" | Heading: {vp.heading.as_(AngleUnits.DEGREES):.2f}°"

    if vp.has_pitch:
        text += f" | Pitch: {vp.pitch.as_(AngleUnits.DEGREES):.2f}°"

    if vp.has_range:
        range_m = vp.range.as_(DistanceUnits.METERS)
        if range_m >= 1000.0:
            text += f" | Range: {range_m / 1000.0:.2f}km"
        else:
            text += f" | Range: {range_m:.2f}m"

    return text
