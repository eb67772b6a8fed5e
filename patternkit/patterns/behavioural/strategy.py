"""Strategy pattern: ride matching.

The naive ``RideMatchingService.match_rider(location, matching_type)`` is an
``if``/``elif`` chain over strategy names. Adding a strategy means editing the
service, and no single strategy can be tested on its own.

Each matching algorithm is a class behind ``MatchingStrategy``. The service
holds one and can swap it at runtime; strategies can also be picked by tag
from a registry.
"""
from abc import ABC, abstractmethod

from patternkit.infrastructure.registry import CapabilityRegistry, case_insensitive


class MatchingStrategy(ABC):
    """Algorithm that pairs a rider with a driver."""

    @abstractmethod
    def match(self, rider_location: str) -> str:
        """Match a rider and describe the result."""


class NearestDriverStrategy(MatchingStrategy):
    def match(self, rider_location: str) -> str:
        return f"Matching with the nearest available driver to {rider_location}"


class AirportQueueStrategy(MatchingStrategy):
    def match(self, rider_location: str) -> str:
        return f"Matching using FIFO airport queue for {rider_location}"


class SurgePriorityStrategy(MatchingStrategy):
    def match(self, rider_location: str) -> str:
        return f"Matching rider using surge pricing priority near {rider_location}"


def create_strategy_registry() -> CapabilityRegistry[MatchingStrategy]:
    """Registry of the built-in matching strategies."""
    registry: CapabilityRegistry[MatchingStrategy] = CapabilityRegistry(
        "Matching strategy", normalize=case_insensitive
    )
    registry.register("nearest", NearestDriverStrategy())
    registry.register("surge_priority", SurgePriorityStrategy())
    registry.register("airport_queue", AirportQueueStrategy())
    return registry


STRATEGIES = create_strategy_registry()


class RideMatchingService:
    """Context that delegates matching to its current strategy."""

    def __init__(self, strategy: MatchingStrategy):
        self.strategy = strategy

    @classmethod
    def for_tag(cls, tag: str) -> "RideMatchingService":
        """Build a service using the registered strategy for ``tag``."""
        return cls(STRATEGIES.resolve(tag))

    def set_strategy(self, strategy: MatchingStrategy) -> None:
        self.strategy = strategy

    def match_rider(self, location: str) -> str:
        result = self.strategy.match(location)
        print(result)
        return result


def main() -> None:
    airport_service = RideMatchingService(AirportQueueStrategy())
    airport_service.match_rider("Terminal 1")

    city_service = RideMatchingService.for_tag("nearest")
    city_service.match_rider("Downtown")
    city_service.set_strategy(STRATEGIES.resolve("surge_priority"))
    city_service.match_rider("Downtown")


if __name__ == "__main__":
    main()
