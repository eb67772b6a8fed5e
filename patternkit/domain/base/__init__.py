"""Domain base package - exceptions and event types shared across demonstrations."""

from .events import DomainEvent, StatusChangeEvent, VideoUploadedEvent
from .exceptions import (
    CapabilityNotFoundError,
    ConfigurationError,
    DomainException,
    IllegalTransitionError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "DomainEvent",
    "StatusChangeEvent",
    "VideoUploadedEvent",
    "DomainException",
    "ValidationError",
    "NotFoundError",
    "CapabilityNotFoundError",
    "IllegalTransitionError",
    "ConfigurationError",
]
