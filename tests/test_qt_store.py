from __future__ import annotations

from typing import Any, Callable

import pytest

from geonavigation.app.recorder import ViewpointRecorder
from geonavigation.app.state import NavigationStore
from geonavigation.config import AUTO_RECORD_NAME
from geonavigation.model.viewpoint import Viewpoint


def _vp(lon: float, name: str | None = None) -> Viewpoint:
    return Viewpoint.from_values(name, lon, 0.0, range_m=1000.0)


@pytest.fixture
def store(qapp) -> NavigationStore:
    return NavigationStore()


@pytest.fixture
def state_events(store: NavigationStore) -> list[tuple[bool, bool]]:
    received: list[tuple[bool, bool]] = []
    store.history_state_changed.connect(lambda back, forward: received.append((back, forward)))
    return received


@pytest.fixture
def requested(store: NavigationStore) -> list[Viewpoint]:
    received: list[Viewpoint] = []
    store.viewpoint_requested.connect(received.append)
    return received


# ------------------------------------------------------------------------------
# NavigationStore
# ------------------------------------------------------------------------------

def test_signal_mirrors_history_notifications(store, state_events) -> None:
    store.record(_vp(0.0))
    store.record(_vp(0.0))
    store.clear()
    assert state_events == [(True, False), (False, False)]


def test_back_and_forward_request_camera_moves(store, state_events, requested) -> None:
    store.record(_vp(0.0, "A"))
    assert store.go_back(_vp(1.0, "B"))
    assert requested[-1].name == "A"
    assert store.can_go_forward()

    assert store.go_forward(_vp(0.0, "A"))
    assert requested[-1].name == "B"
    assert state_events == [(True, False), (False, True), (True, False)]


def test_failed_back_requests_nothing(store, requested) -> None:
    assert not store.go_back(_vp(0.0))
    assert not store.go_forward(_vp(0.0))
    assert requested == []


def test_jump_to_listing_row(store, requested) -> None:
    store.record(_vp(0.0, "A"))
    store.record(_vp(1.0, "B"))
    here = _vp(2.0, "here")
    items = store.items(here)

    assert store.jump_to(here, items[0])
    assert requested[-1].name == "A"
    # known target: nothing recorded
    assert store.history.get_history_count() == 2


def test_jump_to_current_row_is_ignored(store, requested) -> None:
    here = _vp(2.0, "here")
    current_row = store.items(here)[0]
    assert current_row.is_current
    assert not store.jump_to(here, current_row)
    assert requested == []


# ------------------------------------------------------------------------------
# ViewpointRecorder
# ------------------------------------------------------------------------------

class FakeInteractor:
    def __init__(self) -> None:
        self.observers: dict[str, Callable[..., Any]] = {}

    def add_observer(self, event: str, callback: Callable[..., Any]) -> None:
        self.observers[event] = callback


class FakePlotter:
    def __init__(self) -> None:
        self.iren = FakeInteractor()


class CameraFeed:
    """Provider returning whatever pose the test sets."""

    def __init__(self, viewpoint: Viewpoint) -> None:
        self.viewpoint = viewpoint

    def __call__(self) -> Viewpoint:
        return self.viewpoint


def test_recorder_debounces_until_flush(store) -> None:
    feed = CameraFeed(_vp(0.0))
    recorder = ViewpointRecorder(store, feed, interval_ms=10_000)

    recorder.schedule()
    feed.viewpoint = _vp(3.0)
    recorder.schedule()
    assert recorder.is_pending()
    assert store.history.get_history_count() == 0

    assert recorder.flush()
    assert not recorder.is_pending()
    entries = store.history.back_entries()
    assert len(entries) == 1
    assert entries[0].focal_point.lon == 3.0
    assert entries[0].name == AUTO_RECORD_NAME

    assert not recorder.flush()


def test_recorder_keeps_provider_name(store) -> None:
    recorder = ViewpointRecorder(store, CameraFeed(_vp(0.0, "Plan")), interval_ms=10_000)
    recorder.schedule()
    recorder.flush()
    assert store.history.back_entries()[0].name == "Plan"


def test_record_now_cancels_pending_and_renames(store) -> None:
    feed = CameraFeed(_vp(4.0, "Plan"))
    recorder = ViewpointRecorder(store, feed, interval_ms=10_000)
    recorder.schedule()

    recorder.record_now("Before 2D Mode")
    assert not recorder.is_pending()
    assert store.history.back_entries()[0].name == "Before 2D Mode"
    # the provider's value is not renamed in place
    assert feed.viewpoint.name == "Plan"


def test_attach_observes_user_interaction(store) -> None:
    plotter = FakePlotter()
    recorder = ViewpointRecorder(store, CameraFeed(_vp(0.0)), interval_ms=10_000)
    recorder.attach(plotter)

    assert set(plotter.iren.observers) == {
        "EndInteractionEvent",
        "MouseWheelForwardEvent",
        "MouseWheelBackwardEvent",
    }
    plotter.iren.observers["MouseWheelForwardEvent"](object(), "MouseWheelForwardEvent")
    assert recorder.is_pending()
    recorder.flush()
    assert store.history.get_history_count() == 1
