"""Registry of process-wide singleton instances."""

import threading
from typing import Any, Dict, Optional, Type, TypeVar

from patternkit.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Holds at most one instance per class.

    The registry itself is a singleton, created with double-checked locking.
    """

    _instance: Optional["SingletonRegistry"] = None
    _lock = threading.RLock()

    def __init__(self):
        self._instances: Dict[Type, Any] = {}
        self._instances_lock = threading.RLock()
        self._logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get singleton instance of the registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """Return the instance of ``singleton_class``, creating it on first use."""
        if singleton_class not in self._instances:
            with self._instances_lock:
                if singleton_class not in self._instances:
                    self._instances[singleton_class] = singleton_class(*args, **kwargs)
                    self._logger.debug("Created singleton", cls=singleton_class.__name__)
        return self._instances[singleton_class]

    def has(self, singleton_class: Type) -> bool:
        """Check whether an instance already exists."""
        return singleton_class in self._instances

    def reset(self, singleton_class: Optional[Type] = None) -> None:
        """Drop one instance, or all of them when no class is given."""
        with self._instances_lock:
            if singleton_class is None:
                self._instances.clear()
            else:
                self._instances.pop(singleton_class, None)
