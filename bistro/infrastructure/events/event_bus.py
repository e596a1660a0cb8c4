"""
Event bus implementation for domain event publishing and subscription.

The event bus routes directory change notifications to registered
handlers. Publishing is synchronous: handlers run on the publisher's thread,
in subscription order, before ``publish`` returns.
"""

import logging
from abc import ABC, abstractmethod
from collections import defaultdict, deque
from collections.abc import Callable

from bistro.core.config import settings
from bistro.domain.shared.base import DomainEvent

logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], None]


class EventBusInterface(ABC):
    """
    Abstract interface for event bus implementations.

    Defines the contract for publishing events and subscribing to event types.
    """

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """
        Publish a domain event to all registered handlers.

        Args:
            event: Domain event to publish
        """
        pass

    @abstractmethod
    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """
        Subscribe a handler to a specific event type.

        Handlers subscribed to a base event type also receive its subclasses.

        Args:
            event_type: Type of event to subscribe to
            handler: Handler function to call when event is published
        """
        pass

    @abstractmethod
    def unsubscribe(
        self, event_type: type[DomainEvent], handler: EventHandler
    ) -> None:
        """
        Unsubscribe a handler from a specific event type.

        Args:
            event_type: Type of event to unsubscribe from
            handler: Handler function to remove
        """
        pass

    @abstractmethod
    def clear_handlers(self, event_type: type[DomainEvent] | None = None) -> None:
        """
        Clear event handlers.

        Args:
            event_type: Optional event type to clear handlers for. If None, clears all.
        """
        pass


class InMemoryEventBus(EventBusInterface):
    """
    In-memory implementation of event bus.

    A failing handler is logged and does not stop delivery to the remaining
    handlers, nor does it propagate to the publisher.
    """

    def __init__(self, max_history_size: int | None = None):
        """
        Initialize the event bus.

        Args:
            max_history_size: Number of published events to remember.
                Defaults to ``settings.EVENT_HISTORY_SIZE``.
        """
        if max_history_size is None:
            max_history_size = settings.EVENT_HISTORY_SIZE
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(
            list
        )
        self._event_history: deque[DomainEvent] = deque(maxlen=max_history_size)

    def publish(self, event: DomainEvent) -> None:
        self._event_history.append(event)

        event_type = type(event)
        handlers = self._handlers_for(event_type)

        if not handlers:
            logger.debug(
                f"No handlers registered for event type: {event_type.__name__}"
            )
            return

        logger.debug(
            f"Publishing event {event_type.__name__} to {len(handlers)} handlers"
        )

        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(
                    f"Error handling event {event_type.__name__} with {handler!r}"
                )
                # Continue with other handlers even if one fails

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        if handler not in self._handlers[event_type]:
            self._handlers[event_type].append(handler)
            logger.debug(
                f"Subscribed handler {handler!r} to event type {event_type.__name__}"
            )
        else:
            logger.warning(
                f"Handler {handler!r} already subscribed to event type {event_type.__name__}"
            )

    def unsubscribe(
        self, event_type: type[DomainEvent], handler: EventHandler
    ) -> None:
        if handler in self._handlers.get(event_type, []):
            self._handlers[event_type].remove(handler)
            logger.debug(
                f"Unsubscribed handler {handler!r} from event type {event_type.__name__}"
            )
        else:
            logger.warning(
                f"Handler {handler!r} not found for event type {event_type.__name__}"
            )

    def clear_handlers(self, event_type: type[DomainEvent] | None = None) -> None:
        if event_type:
            self._handlers.pop(event_type, None)
            logger.debug(f"Cleared handlers for event type {event_type.__name__}")
        else:
            self._handlers.clear()
            logger.debug("Cleared all event handlers")

    def get_handler_count(self, event_type: type[DomainEvent]) -> int:
        """Get the number of handlers that would receive ``event_type``."""
        return len(self._handlers_for(event_type))

    def get_event_history(
        self, event_type: type[DomainEvent] | None = None
    ) -> list[DomainEvent]:
        """
        Get history of published events, oldest first.

        Args:
            event_type: Optional event type to filter by (subclasses included)
        """
        if event_type:
            return [
                event for event in self._event_history if isinstance(event, event_type)
            ]
        return list(self._event_history)

    def clear_event_history(self) -> None:
        self._event_history.clear()

    def _handlers_for(self, event_type: type[DomainEvent]) -> list[EventHandler]:
        handlers: list[EventHandler] = []
        for cls in event_type.__mro__:
            for handler in self._handlers.get(cls, []):
                if handler not in handlers:
                    handlers.append(handler)
        return handlers

