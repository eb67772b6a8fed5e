"""Capability Registry - maps discrete tags to interchangeable implementations.

The registry replaces hard-coded ``if``/``elif`` dispatch on a type string:
implementations are registered against a tag and resolved at runtime. It is the
common structure behind the strategy, factory, command and catalogue code.
"""

import threading
from enum import Enum
from typing import Any, Callable, Dict, Generic, Hashable, List, Optional, TypeVar

from patternkit.domain.base.exceptions import CapabilityNotFoundError
from patternkit.infrastructure.logging.logger import get_logger

T = TypeVar("T")


def tag_label(tag: Hashable) -> str:
    """Readable label for a tag, using the value of enum members."""
    if isinstance(tag, Enum):
        return str(tag.value)
    return str(tag)


class CapabilityRegistry(Generic[T]):
    """
    Registry of implementations for a single capability.

    Re-registering a tag replaces the previous implementation (last write
    wins). Resolving an unknown tag raises ``CapabilityNotFoundError``.
    """

    def __init__(self,
                 name: str = "Capability",
                 normalize: Optional[Callable[[Hashable], Hashable]] = None):
        """
        Initialize the registry.

        Args:
            name: Capability name used in log and error messages
            normalize: Optional function canonicalising tags before every lookup
        """
        self.name = name
        self._normalize = normalize
        self._registrations: Dict[Hashable, T] = {}
        self._registration_lock = threading.RLock()
        self._logger = get_logger(__name__)

    def _key(self, tag: Hashable) -> Hashable:
        return self._normalize(tag) if self._normalize else tag

    def register(self, tag: Hashable, implementation: T) -> None:
        """
        Associate a tag with an implementation.

        Args:
            tag: Identifier used to select the implementation
            implementation: Fully constructed implementation or factory
        """
        key = self._key(tag)
        with self._registration_lock:
            replaced = key in self._registrations
            self._registrations[key] = implementation
        if replaced:
            self._logger.debug("Replaced registration", capability=self.name, tag=tag_label(key))
        else:
            self._logger.debug("Registered implementation", capability=self.name, tag=tag_label(key))

    def unregister(self, tag: Hashable) -> bool:
        """
        Remove a tag.

        Returns:
            True if the tag was registered, False otherwise
        """
        key = self._key(tag)
        with self._registration_lock:
            if key in self._registrations:
                del self._registrations[key]
                self._logger.debug("Unregistered implementation", capability=self.name, tag=tag_label(key))
                return True
            return False

    def resolve(self, tag: Hashable) -> T:
        """
        Get the implementation registered for a tag.

        Raises:
            CapabilityNotFoundError: If the tag has no association
        """
        key = self._key(tag)
        try:
            return self._registrations[key]
        except KeyError:
            raise CapabilityNotFoundError(
                tag_label(key), self.registered_labels(), kind=self.name
            ) from None

    def invoke(self, tag: Hashable, *args: Any, **kwargs: Any) -> Any:
        """Resolve the tag and call the implementation with the given arguments."""
        return self.resolve(tag)(*args, **kwargs)

    def is_registered(self, tag: Hashable) -> bool:
        """Check if a tag is registered."""
        return self._key(tag) in self._registrations

    def registered_tags(self) -> List[Hashable]:
        """Registered tags in registration order."""
        return list(self._registrations.keys())

    def registered_labels(self) -> List[str]:
        """Registered tags rendered as strings."""
        return [tag_label(tag) for tag in self._registrations]

    def clear(self) -> None:
        """Remove every registration."""
        with self._registration_lock:
            self._registrations.clear()

    def __contains__(self, tag: Hashable) -> bool:
        return self.is_registered(tag)

    def __len__(self) -> int:
        return len(self._registrations)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, tags={self.registered_labels()!r})"


def case_insensitive(tag: Hashable) -> Hashable:
    """Tag normaliser that lower-cases string tags."""
    return tag.lower() if isinstance(tag, str) else tag
