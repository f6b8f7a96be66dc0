from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from geonavigation.config import MAX_HISTORY_SIZE
from geonavigation.controller.navigation import NavigationHistory
from geonavigation.controller.presentation import HistoryItem
from geonavigation.model.viewpoint import Viewpoint

logger = logging.getLogger(__name__)


class NavigationStore(QObject):
    """Qt facade over NavigationHistory with signals for toolbar buttons and listings."""
    history_state_changed = Signal(bool, bool)  # can_back, can_forward
    viewpoint_requested = Signal(object)  # Viewpoint the camera should fly to

    def __init__(self, history: Optional[NavigationHistory] = None, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.history = history if history is not None else NavigationHistory(MAX_HISTORY_SIZE)
        self.history.add_listener(self._on_history_changed)

    def _on_history_changed(self, can_back: bool, can_forward: bool) -> None:
        self.history_state_changed.emit(can_back, can_forward)

    # ---- commands ----

    def record(self, viewpoint: Viewpoint) -> None:
        self.history.push_viewpoint(viewpoint)

    def go_back(self, current: Viewpoint) -> bool:
        ok, target = self.history.go_back(current)
        if ok:
            self.viewpoint_requested.emit(target)
        return ok

    def go_forward(self, current: Viewpoint) -> bool:
        ok, target = self.history.go_forward(current)
        if ok:
            self.viewpoint_requested.emit(target)
        return ok

    def jump_to(self, current: Viewpoint, item: HistoryItem) -> bool:
        """
        Jump to a listing row. The current row is not a destination.

        Returns:
            True if the camera was asked to move.
        """
        if item.is_current:
            logger.info("Already at the selected viewpoint.")
            return False

        known = self.history.jump_to_viewpoint(current, item.viewpoint)
        logger.debug(f"Jumping to {item.display_name!r} (already in history: {known}).")
        self.viewpoint_requested.emit(item.viewpoint.copy())
        return True

    def clear(self) -> None:
        self.history.clear()

    # ---- queries ----

    def can_go_back(self) -> bool:
        return self.history.can_go_back()

    def can_go_forward(self) -> bool:
        return self.history.can_go_forward()

    def items(self, current: Viewpoint) -> list[HistoryItem]:
        return self.history.get_all_history(current)
