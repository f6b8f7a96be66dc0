"""
Navigation History (Controller)
===============================
Back/forward navigation over camera viewpoints, like browser history but
aware of the geometry of the scene.

Why is this file needed?
------------------------
1. Deduplication: camera updates arrive often; near-identical viewpoints are
   not recorded twice (see ``model.similarity``).
2. Bounded memory: the back and forward stacks each keep at most
   ``max_size`` entries, evicting the oldest.
3. Branch invalidation: recording a new viewpoint discards the forward
   stack, exactly like a browser.

Every mutation that changes state notifies the registered listeners once
with ``(can_go_back, can_go_forward)``. Nothing in here raises; failures
are reported through return values.

Classes:
    NavigationHistory: The controller owning both stacks.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from geonavigation.config import MAX_HISTORY_SIZE
from geonavigation.controller.presentation import HistoryItem, build_history_items
from geonavigation.model.history_stack import BoundedStack
from geonavigation.model.similarity import is_similar_for_dedup, viewpoints_equal
from geonavigation.model.viewpoint import Viewpoint

logger = logging.getLogger(__name__)

StateListener = Callable[[bool, bool], None]


class NavigationHistory:
    """Owns the back/forward stacks and the record/back/forward/jump logic."""

    def __init__(self, max_size: int = MAX_HISTORY_SIZE) -> None:
        self._back: BoundedStack[Viewpoint] = BoundedStack(max_size)
        self._forward: BoundedStack[Viewpoint] = BoundedStack(max_size)
        self._listeners: list[StateListener] = []

    @property
    def max_size(self) -> int:
        return self._back.max_size

    # ------------------------------------------------------------------------------
    # Notification
    # ------------------------------------------------------------------------------

    def add_listener(self, callback: StateListener) -> None:
        """Register ``callback(can_back, can_forward)``, called after each effective mutation."""
        if callback not in self._listeners:
            self._listeners.append(callback)

    def remove_listener(self, callback: StateListener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _emit_state_changed(self) -> None:
        can_back, can_forward = self.can_go_back(), self.can_go_forward()
        for callback in list(self._listeners):
            callback(can_back, can_forward)

    # ------------------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------------------

    def push_viewpoint(self, viewpoint: Viewpoint) -> None:
        """
        Record a viewpoint the camera is leaving.

        Skipped silently (no notification) when it equals, or is similar to,
        the most recently recorded viewpoint. Otherwise it is pushed onto the
        back stack and the forward stack is discarded.
        """
        last = self._back.peek()
        if last is not None:
            if viewpoints_equal(viewpoint, last):
                logger.debug(f"Skipping viewpoint {viewpoint.name!r}: identical to the last one.")
                return
            if is_similar_for_dedup(viewpoint, last):
                logger.debug(f"Skipping viewpoint {viewpoint.name!r}: too close to the last one.")
                return

        self._push_evicting(self._back, viewpoint, "back")

        if self._forward:
            logger.debug(f"Discarding {len(self._forward)} forward entries (new branch).")
        self._forward.clear()

        logger.debug(f"Recorded viewpoint {viewpoint.name!r} (back={len(self._back)}).")
        self._emit_state_changed()

    def go_back(self, current: Viewpoint) -> tuple[bool, Optional[Viewpoint]]:
        """
        Step back one viewpoint.

        Args:
            current: Where the camera is now; saved onto the forward stack.

        Returns:
            ``(True, viewpoint)`` to fly to, or ``(False, None)`` when the
            back stack is empty (nothing is changed then).
        """
        if self._back.is_empty():
            return False, None

        self._push_evicting(self._forward, current, "forward")
        target = self._back.pop()

        logger.debug(f"Back to {target.name!r} (back={len(self._back)}, forward={len(self._forward)}).")
        self._emit_state_changed()
        return True, target

    def go_forward(self, current: Viewpoint) -> tuple[bool, Optional[Viewpoint]]:
        """Mirror of ``go_back``: ``current`` is saved onto the back stack."""
        if self._forward.is_empty():
            return False, None

        self._push_evicting(self._back, current, "back")
        target = self._forward.pop()

        logger.debug(f"Forward to {target.name!r} (back={len(self._back)}, forward={len(self._forward)}).")
        self._emit_state_changed()
        return True, target

    def clear(self) -> None:
        """Empty both stacks. Always notifies, even when already empty."""
        self._back.clear()
        self._forward.clear()
        logger.debug("Navigation history cleared.")
        self._emit_state_changed()

    def jump_to_viewpoint(self, current: Viewpoint, target: Viewpoint) -> bool:
        """
        Prepare a jump from ``current`` to ``target``.

        Returns:
            True if ``target`` is already in the history; nothing is recorded
            and the stacks are left untouched (the entry is not moved).
            False if it is not; ``current`` is recorded via ``push_viewpoint``
            and the caller is expected to treat ``target`` as a fresh
            destination.
        """
        if self.is_viewpoint_in_history(target):
            logger.debug(f"Jump to known viewpoint {target.name!r}; history unchanged.")
            return True

        self.push_viewpoint(current)
        return False

    def _push_evicting(self, stack: BoundedStack[Viewpoint], viewpoint: Viewpoint, label: str) -> None:
        evicted = stack.push(viewpoint.copy())
        if evicted is not None:
            logger.debug(f"Evicted oldest {label} entry {evicted.name!r} (limit {stack.max_size}).")

    # ------------------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------------------

    def can_go_back(self) -> bool:
        return not self._back.is_empty()

    def can_go_forward(self) -> bool:
        return not self._forward.is_empty()

    def get_history_count(self) -> int:
        return len(self._back) + len(self._forward)

    def is_viewpoint_in_history(self, viewpoint: Viewpoint) -> bool:
        """Exact-equality membership over both stacks (the current viewpoint is not consulted)."""
        return any(viewpoints_equal(viewpoint, other) for other in self._back) or any(
            viewpoints_equal(viewpoint, other) for other in self._forward
        )

    def get_all_history(self, current: Viewpoint) -> list[HistoryItem]:
        """Oldest-first listing: back entries, the current viewpoint, then forward entries."""
        return build_history_items(self._back.oldest_first(), current, self._forward.top_first())

    def back_entries(self) -> list[Viewpoint]:
        """Copies of the back stack, bottom (oldest) first."""
        return [vp.copy() for vp in self._back.oldest_first()]

    def forward_entries(self) -> list[Viewpoint]:
        """Copies of the forward stack, bottom first (the farthest future entry leads)."""
        return [vp.copy() for vp in self._forward.oldest_first()]
