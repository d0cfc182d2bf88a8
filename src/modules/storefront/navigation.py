"""Client-side router with route-change observers.

``Router.push`` publishes ``RouteChangeStarted`` before loading the target
path and ``RouteChangeCompleted`` or ``RouteChangeFailed`` afterwards.
Observers subscribe on the router's own bus instead of patching global
hooks; ``ProgressIndicator`` is the observer that drives the top-of-page
progress bar.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, Type

import structlog

from modules.storefront.constants import HOME_PATH
from modules.storefront.exceptions import NavigationError
from shared.domain.bus import IEventBus, IEventHandler
from shared.domain.events import DomainEvent
from shared.infrastructure.bus import InMemoryEventBus

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, kw_only=True)
class RouteChangeStarted(DomainEvent):
    path: str


@dataclass(frozen=True, kw_only=True)
class RouteChangeCompleted(DomainEvent):
    path: str


@dataclass(frozen=True, kw_only=True)
class RouteChangeFailed(DomainEvent):
    path: str
    error: str


class Navigator(Protocol):
    """Anything that can move the client to another path."""

    def push(self, path: str) -> None: ...


class Router:
    """Tracks the current path and notifies observers of route changes.

    *loader* is called with the target path before the change is committed
    (e.g. to fetch the page data).  If it raises, the router stays on the
    current path, publishes ``RouteChangeFailed`` and raises
    ``NavigationError``.
    """

    def __init__(
        self,
        pathname: str = HOME_PATH,
        loader: Optional[Callable[[str], Any]] = None,
        bus: Optional[IEventBus] = None,
    ) -> None:
        self._pathname = pathname
        self._loader = loader
        self._bus = bus or InMemoryEventBus()

    @property
    def pathname(self) -> str:
        return self._pathname

    def is_active(self, path: str) -> bool:
        return path == self._pathname

    def subscribe(self, event_class: Type[DomainEvent], handler: IEventHandler) -> None:
        self._bus.subscribe(event_class, handler)

    def unsubscribe(self, event_class: Type[DomainEvent], handler: IEventHandler) -> None:
        self._bus.unsubscribe(event_class, handler)

    def push(self, path: str) -> None:
        self._bus.publish(RouteChangeStarted(path=path))
        if self._loader is not None:
            try:
                self._loader(path)
            except Exception as exc:
                logger.warning("route.change_failed", path=path, error=str(exc))
                self._bus.publish(RouteChangeFailed(path=path, error=str(exc)))
                raise NavigationError(f"Could not load {path}: {exc}") from exc
        self._pathname = path
        logger.info("route.changed", path=path)
        self._bus.publish(RouteChangeCompleted(path=path))


class ProgressIndicator:
    """Route-change observer that starts and finishes a progress bar."""

    def __init__(self) -> None:
        self.active = False
        self.runs = 0

    def attach(self, router: Router) -> None:
        for event_class in (RouteChangeStarted, RouteChangeCompleted, RouteChangeFailed):
            router.subscribe(event_class, self)

    def detach(self, router: Router) -> None:
        for event_class in (RouteChangeStarted, RouteChangeCompleted, RouteChangeFailed):
            router.unsubscribe(event_class, self)

    def handle(self, event: DomainEvent) -> None:
        if isinstance(event, RouteChangeStarted):
            self.start()
        else:
            self.done()

    def start(self) -> None:
        self.active = True
        self.runs += 1

    def done(self) -> None:
        self.active = False
