"""Domain exceptions shared by every pattern demonstration."""

from typing import Any, Dict, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainException):
    """Raised when domain validation fails."""


class NotFoundError(DomainException):
    """Raised when a tagged implementation cannot be found."""

    def __init__(self, kind: str, tag: Any, available: Optional[List[str]] = None):
        available = available or []
        message = f"{kind} '{tag}' is not registered"
        if available:
            message += f". Available: {', '.join(available)}"
        super().__init__(
            message,
            "NOT_FOUND",
            {"kind": kind, "tag": str(tag), "available": available},
        )
        self.kind = kind
        self.tag = tag
        self.available = available


class CapabilityNotFoundError(NotFoundError):
    """Raised when a registry has no implementation for a tag."""

    def __init__(self, tag: Any, available: Optional[List[str]] = None, kind: str = "Capability"):
        super().__init__(kind, tag, available)


class IllegalTransitionError(DomainException):
    """Raised when an event is not allowed from the current state."""

    def __init__(self, current_state: str, event: str, reason: Optional[str] = None):
        message = reason or f"Cannot apply '{event}' in state {current_state}"
        super().__init__(
            message,
            "ILLEGAL_TRANSITION",
            {"current_state": current_state, "event": event},
        )
        self.current_state = current_state
        self.event = event


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""

    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message, "CONFIGURATION_ERROR", {"missing_fields": missing_fields or []})
        self.missing_fields = missing_fields or []
