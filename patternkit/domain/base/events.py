"""Base event classes - foundation for the event-driven demonstrations."""
from datetime import datetime
from typing import Any, Dict, Optional, Protocol
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class DomainEvent(BaseModel):
    """Base class for all domain events."""
    model_config = ConfigDict(frozen=True)

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    occurred_at: datetime = Field(default_factory=datetime.utcnow)
    event_type: str = ""
    aggregate_id: str
    aggregate_type: str
    metadata: Dict[str, Any] = Field(default_factory=dict)

    def __init__(self, **data):
        # Set event_type based on class name if not provided
        if not data.get('event_type'):
            data['event_type'] = self.__class__.__name__
        super().__init__(**data)


class StatusChangeEvent(DomainEvent):
    """Base class for events that track status transitions."""
    old_status: str
    new_status: str
    trigger: str
    reason: Optional[str] = None


class VideoUploadedEvent(DomainEvent):
    """Raised by a channel when a new video goes live."""
    video_title: str


class EventHandler(Protocol):
    """Protocol for event handlers."""

    def __call__(self, event: DomainEvent) -> None:
        """Handle a domain event."""
        ...
