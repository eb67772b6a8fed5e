# patternkit/infrastructure/event/event_publisher.py
from typing import Callable, Dict, List

from patternkit.domain.base.events import DomainEvent
from patternkit.infrastructure.logging.logger import get_logger

Handler = Callable[[DomainEvent], None]


class EventPublisher:
    """
    In-process publish/subscribe hub.
    Delivers domain events to the handlers registered for their type, in
    registration order. Handler errors propagate to the publisher's caller.
    """

    def __init__(self):
        self._handlers: Dict[str, List[Handler]] = {}
        self._logger = get_logger(__name__)

    def register(self, event_type: str, handler: Handler) -> None:
        """Register a handler for a specific event type."""
        self._handlers.setdefault(event_type, []).append(handler)
        self._logger.debug("Registered handler", event_type=event_type)

    def unregister(self, event_type: str, handler: Handler) -> bool:
        """Remove a handler. Returns False when it was not registered."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)
            return True
        return False

    def handlers_for(self, event_type: str) -> List[Handler]:
        """Registered handlers for an event type."""
        return list(self._handlers.get(event_type, []))

    def publish(self, event: DomainEvent) -> None:
        """Publish a single event to all registered handlers."""
        handlers = self.handlers_for(event.event_type)
        self._logger.debug("Publishing event", event_type=event.event_type, handlers=len(handlers))
        for handler in handlers:
            handler(event)

    def publish_all(self, events: List[DomainEvent]) -> None:
        """Publish multiple events."""
        for event in events:
            self.publish(event)
