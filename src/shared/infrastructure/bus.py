"""In-memory event bus implementation."""

from __future__ import annotations

from typing import Dict, List, Type

import structlog

from shared.domain.bus import IEventBus, IEventHandler
from shared.domain.events import DomainEvent

logger = structlog.get_logger(__name__)


class InMemoryEventBus(IEventBus):
    """Simple in-process, synchronous event bus.

    Handlers run in subscription order on the publisher's thread; an
    exception raised by a handler propagates to the publisher.
    """

    def __init__(self) -> None:
        self._handlers: Dict[Type[DomainEvent], List[IEventHandler]] = {}

    def subscribe(self, event_class: Type[DomainEvent], handler: IEventHandler) -> None:
        handlers = self._handlers.setdefault(event_class, [])
        if handler not in handlers:
            handlers.append(handler)

    def unsubscribe(self, event_class: Type[DomainEvent], handler: IEventHandler) -> None:
        handlers = self._handlers.get(event_class, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, event: DomainEvent) -> None:
        handlers = list(self._handlers.get(type(event), []))
        logger.debug("event.published", event_name=event.event_name, handlers=len(handlers))
        for handler in handlers:
            handler.handle(event)


# Process-wide bus for server-side domain events
event_bus = InMemoryEventBus()
