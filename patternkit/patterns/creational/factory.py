"""Factory pattern: choosing a logistics mode.

A ``LogisticsService`` that instantiates ``Air()`` or ``Road()`` itself in an
``if``/``elif`` must change for every new mode.

Creation is delegated to ``LogisticsFactory``, which resolves the mode from a
registry of constructors. Modes are matched case-insensitively, and an unknown
mode raises ``CapabilityNotFoundError``.
"""
from abc import ABC, abstractmethod
from typing import Callable, List

from patternkit.infrastructure.registry import CapabilityRegistry, case_insensitive


class Logistics(ABC):
    @abstractmethod
    def send(self) -> str:
        ...


class Road(Logistics):
    def send(self) -> str:
        return "Sending by road logic"


class Air(Logistics):
    def send(self) -> str:
        return "Sending by air logic"


class LogisticsFactory:
    """Creates logistics implementations by mode."""

    _registry: CapabilityRegistry[Callable[[], Logistics]] = CapabilityRegistry(
        "Logistics mode", normalize=case_insensitive
    )

    @classmethod
    def register(cls, mode: str, constructor: Callable[[], Logistics]) -> None:
        cls._registry.register(mode, constructor)

    @classmethod
    def get_logistics(cls, mode: str) -> Logistics:
        return cls._registry.invoke(mode)

    @classmethod
    def modes(cls) -> List[str]:
        return cls._registry.registered_labels()

    @classmethod
    def reset(cls) -> None:
        """Drop custom modes and restore the built-in ones."""
        cls._registry.clear()
        cls.register("air", Air)
        cls.register("road", Road)


LogisticsFactory.reset()


class LogisticsService:
    def send(self, mode: str) -> str:
        logistics = LogisticsFactory.get_logistics(mode)
        result = logistics.send()
        print(result)
        return result


def main() -> None:
    service = LogisticsService()
    service.send("Air")
    service.send("Road")


if __name__ == "__main__":
    main()
