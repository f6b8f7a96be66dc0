from geonavigation.controller.navigation import NavigationHistory, StateListener
from geonavigation.controller.presentation import HistoryItem, build_history_items, format_viewpoint_info

__all__ = ["NavigationHistory", "StateListener", "HistoryItem", "build_history_items", "format_viewpoint_info"]
