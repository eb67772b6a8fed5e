"""Singleton pattern: one analytics tracker per process.

Creating a ``JudgeAnalytics`` wherever it's needed would scatter submission
counts across many objects.

Three ways of guaranteeing a single instance:

* eager: a module-level instance, created on import and handed out by
  ``get_judge_analytics``; Python runs module bodies once, so nothing else
  is needed
* lazy: ``get_instance`` creates the instance on first use, guarded by
  double-checked locking
* registry: ``get_singleton`` looks the class up in the process-wide
  ``SingletonRegistry``
"""
import threading
from typing import Dict, Optional

from patternkit.infrastructure.patterns import get_singleton


class JudgeAnalytics:
    """Counts submissions per problem."""

    def __init__(self):
        self._submissions: Dict[str, int] = {}

    def record_submission(self, problem: str) -> int:
        self._submissions[problem] = self._submissions.get(problem, 0) + 1
        return self._submissions[problem]

    def submissions(self, problem: str) -> int:
        return self._submissions.get(problem, 0)


# Eager initialisation
judge_analytics = JudgeAnalytics()


def get_judge_analytics() -> JudgeAnalytics:
    """Eagerly created instance. Calling ``JudgeAnalytics()`` directly bypasses it."""
    return judge_analytics


class LazyJudgeAnalytics(JudgeAnalytics):
    """Created on first ``get_instance`` call."""

    _instance: Optional["LazyJudgeAnalytics"] = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> "LazyJudgeAnalytics":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        with cls._lock:
            cls._instance = None


class RegisteredJudgeAnalytics(JudgeAnalytics):
    """Obtained through the singleton registry."""


def main() -> None:
    eager = get_judge_analytics()
    print(f"Eager instance shared: {eager is get_judge_analytics()}")

    first = LazyJudgeAnalytics.get_instance()
    second = LazyJudgeAnalytics.get_instance()
    print(f"Lazy instance shared: {first is second}")

    count = first.record_submission("two-sum")
    print(f"Lazy instance state shared: {second.submissions('two-sum') == count}")

    registered = get_singleton(RegisteredJudgeAnalytics)
    print(f"Registry instance shared: {registered is get_singleton(RegisteredJudgeAnalytics)}")


if __name__ == "__main__":
    main()
