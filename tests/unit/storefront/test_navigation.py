"""Unit tests for the storefront router and progress indicator."""

from __future__ import annotations

import pytest

from modules.storefront.exceptions import NavigationError
from modules.storefront.navigation import (
    ProgressIndicator,
    RouteChangeCompleted,
    RouteChangeFailed,
    RouteChangeStarted,
    Router,
)

pytestmark = pytest.mark.unit


class Recorder:
    def __init__(self):
        self.events = []

    def handle(self, event):
        self.events.append(event)


def _subscribe_all(router):
    recorder = Recorder()
    for event_class in (RouteChangeStarted, RouteChangeCompleted, RouteChangeFailed):
        router.subscribe(event_class, recorder)
    return recorder


class TestRouter:
    def test_starts_on_home(self):
        router = Router()
        assert router.pathname == "/"
        assert router.is_active("/")

    def test_push_publishes_start_then_complete(self):
        router = Router()
        recorder = _subscribe_all(router)

        router.push("/cart")

        assert [e.event_name for e in recorder.events] == [
            "RouteChangeStarted",
            "RouteChangeCompleted",
        ]
        assert all(e.path == "/cart" for e in recorder.events)
        assert router.pathname == "/cart"

    def test_loader_receives_target_path(self):
        loaded = []
        router = Router(loader=loaded.append)

        router.push("/product?id=1")

        assert loaded == ["/product?id=1"]

    def test_loader_failure_publishes_failed_and_keeps_path(self):
        def broken(_path):
            raise ValueError("no such page")

        router = Router(pathname="/cart", loader=broken)
        recorder = _subscribe_all(router)

        with pytest.raises(NavigationError, match="no such page"):
            router.push("/missing")

        assert [e.event_name for e in recorder.events] == [
            "RouteChangeStarted",
            "RouteChangeFailed",
        ]
        assert recorder.events[-1].error == "no such page"
        assert router.pathname == "/cart"

    def test_routers_do_not_share_observers(self):
        first, second = Router(), Router()
        recorder = _subscribe_all(first)

        second.push("/cart")

        assert recorder.events == []

    def test_unsubscribe(self):
        router = Router()
        recorder = Recorder()
        router.subscribe(RouteChangeStarted, recorder)
        router.unsubscribe(RouteChangeStarted, recorder)

        router.push("/cart")

        assert recorder.events == []


class TestProgressIndicator:
    def test_runs_for_each_navigation(self):
        router = Router()
        progress = ProgressIndicator()
        progress.attach(router)

        router.push("/cart")
        router.push("/")

        assert progress.runs == 2
        assert not progress.active

    def test_active_while_loading(self):
        progress = ProgressIndicator()
        states = []
        router = Router(loader=lambda _path: states.append(progress.active))
        progress.attach(router)

        router.push("/cart")

        assert states == [True]

    def test_done_after_failure(self):
        def broken(_path):
            raise ValueError("boom")

        router = Router(loader=broken)
        progress = ProgressIndicator()
        progress.attach(router)

        with pytest.raises(NavigationError):
            router.push("/cart")

        assert not progress.active

    def test_detach(self):
        router = Router()
        progress = ProgressIndicator()
        progress.attach(router)
        progress.detach(router)

        router.push("/cart")

        assert progress.runs == 0
