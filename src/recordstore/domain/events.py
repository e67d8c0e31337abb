"""Domain events and the in-process bus that delivers them.

Events are named in the past tense and are immutable. The store publishes
each one exactly once, after the writes of the operation that caused it.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, TypeVar

from recordstore.domain.model.order import OrderStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DomainEvent:
    """Base class for everything the store announces."""


@dataclass(frozen=True)
class UserCreated(DomainEvent):
    user_id: int
    name: str
    wallet: str


@dataclass(frozen=True)
class ProductAdded(DomainEvent):
    product_id: int
    name: str
    price: int


@dataclass(frozen=True)
class OrderPlaced(DomainEvent):
    order_id: int
    user_id: int
    product_id: int


@dataclass(frozen=True)
class OrderStatusUpdated(DomainEvent):
    order_id: int
    new_status: OrderStatus


E = TypeVar("E", bound=DomainEvent)
Handler = Callable[[E], None]


class EventBus:
    """Synchronous publish/subscribe keyed by event class.

    Handlers run on the publishing thread in subscription order. Every
    handler gets the event even if an earlier one fails; the first
    failure is then re-raised to the publisher.
    """

    def __init__(self) -> None:
        self._handlers: dict[type[DomainEvent], list[Handler]] = defaultdict(list)

    def subscribe(self, event_type: type[E], handler: Handler) -> None:
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: type[E], handler: Handler) -> None:
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, event: DomainEvent) -> None:
        logger.debug("Publishing %r", event)
        first_error: Exception | None = None
        for handler in list(self._handlers.get(type(event), [])):
            try:
                handler(event)
            except Exception as exc:
                logger.error("Handler %r failed on %r: %s", handler, event, exc)
                if first_error is None:
                    first_error = exc
        if first_error is not None:
            raise first_error
