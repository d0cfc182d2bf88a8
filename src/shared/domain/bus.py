"""Publish/subscribe contracts shared by the catalog and the storefront router.

Product use cases publish ``ProductCreated`` / ``ProductDeleted`` on the
process-wide bus; each ``Router`` owns a private bus for its route-change
events.
"""

from __future__ import annotations

from typing import Generic, Protocol, Type, TypeVar

from shared.domain.events import DomainEvent

E = TypeVar("E", bound=DomainEvent, contravariant=True)


class IEventHandler(Protocol, Generic[E]):
    """Anything with a ``handle(event)`` method, e.g. ``ProgressIndicator``."""

    def handle(self, event: E) -> None: ...


class IEventBus(Protocol):
    """Routes each published event to the handlers subscribed to its class."""

    def publish(self, event: DomainEvent) -> None: ...

    def subscribe(self, event_class: Type[E], handler: IEventHandler[E]) -> None: ...

    def unsubscribe(self, event_class: Type[E], handler: IEventHandler[E]) -> None: ...
