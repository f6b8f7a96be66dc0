"""
Debounced Viewpoint Recorder
============================
Records the camera pose into the navigation history once the user has
stopped moving it.

Why is this file needed?
------------------------
Interaction events arrive many times per second while the user drags or
zooms. Recording each of them would flood the history, so a single-shot
QTimer is restarted on every event and the pose is recorded only when the
timer finally fires.

Only user-interaction events are observed. Programmatic camera moves (the
fly-to after back/forward) therefore never re-record, which would otherwise
discard the forward branch.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from PySide6.QtCore import QObject, QTimer

from geonavigation.app.state import NavigationStore
from geonavigation.config import AUTO_RECORD_DEBOUNCE_MS, AUTO_RECORD_NAME
from geonavigation.model.viewpoint import Viewpoint

logger = logging.getLogger(__name__)

ViewpointProvider = Callable[[], Viewpoint]

_INTERACTION_EVENTS = (
    "EndInteractionEvent",
    "MouseWheelForwardEvent",
    "MouseWheelBackwardEvent",
)


class ViewpointRecorder(QObject):
    """Pushes ``provider()`` into the store after ``interval_ms`` of camera stillness."""

    def __init__(
        self,
        store: NavigationStore,
        provider: ViewpointProvider,
        interval_ms: int = AUTO_RECORD_DEBOUNCE_MS,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._store = store
        self._provider = provider

        # init debounce timer
        self._record_timer = QTimer(self)
        self._record_timer.setSingleShot(True)
        self._record_timer.setInterval(interval_ms)
        self._record_timer.timeout.connect(self._record_pending)

    def attach(self, plotter: Any) -> None:
        """Schedule a recording after each user interaction with a PyVista plotter."""
        iren = plotter.iren
        for event in _INTERACTION_EVENTS:
            iren.add_observer(event, lambda *_: self.schedule())

    def schedule(self) -> None:
        """(Re)start the debounce window."""
        self._record_timer.start()

    def is_pending(self) -> bool:
        return self._record_timer.isActive()

    def flush(self) -> bool:
        """Record right away if a recording is pending. Returns whether one was."""
        if not self._record_timer.isActive():
            return False
        self._record_timer.stop()
        self._record_pending()
        return True

    def record_now(self, name: Optional[str] = None) -> None:
        """
        Record the current pose immediately, cancelling any pending recording.

        Args:
            name: Label for the entry (e.g. "Before 2D Mode"); keeps the
                provider's own name when omitted.
        """
        self._record_timer.stop()
        viewpoint = self._provider()
        if name is not None:
            viewpoint = viewpoint.copy()
            viewpoint.name = name
        self._store.record(viewpoint)

    def _record_pending(self) -> None:
        viewpoint = self._provider()
        if not viewpoint.has_name:
            viewpoint = viewpoint.copy()
            viewpoint.name = AUTO_RECORD_NAME
        logger.debug("Camera settled, recording viewpoint.")
        self._store.record(viewpoint)
