"""Builder pattern: assembling a burger meal.

A constructor taking bun, patty, sides, toppings, cheese and drink forces
callers to pass ``None`` for everything they don't want, and telescoping
overloads multiply with each option.

``BurgerBuilder`` takes the required parts up front and collects the optional
ones through chained ``with_*`` calls before producing an immutable
``BurgerMeal``.
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from patternkit.domain.base.exceptions import ValidationError


@dataclass(frozen=True)
class BurgerMeal:
    bun: str
    patty: str
    side: Optional[str] = None
    toppings: Tuple[str, ...] = ()
    cheese: bool = False
    drink: Optional[str] = None

    def describe(self) -> str:
        parts = [f"{self.bun} bun", f"{self.patty} patty"]
        if self.cheese:
            parts.append("cheese")
        if self.toppings:
            parts.append("toppings: " + ", ".join(self.toppings))
        if self.side:
            parts.append(f"side: {self.side}")
        if self.drink:
            parts.append(f"drink: {self.drink}")
        return "Burger meal with " + "; ".join(parts)


class BurgerBuilder:
    """Fluent builder for ``BurgerMeal``."""

    def __init__(self, bun: str, patty: str):
        self._bun = bun
        self._patty = patty
        self._side: Optional[str] = None
        self._toppings: List[str] = []
        self._cheese = False
        self._drink: Optional[str] = None

    def with_side(self, side: str) -> "BurgerBuilder":
        self._side = side
        return self

    def with_toppings(self, toppings: Iterable[str]) -> "BurgerBuilder":
        self._toppings = list(toppings)
        return self

    def with_cheese(self, cheese: bool = True) -> "BurgerBuilder":
        self._cheese = cheese
        return self

    def with_drink(self, drink: str) -> "BurgerBuilder":
        self._drink = drink
        return self

    def build(self) -> BurgerMeal:
        """
        Create the meal.

        Raises:
            ValidationError: If the bun or patty is blank
        """
        missing = [name for name, value in (("bun", self._bun), ("patty", self._patty))
                   if not value or not value.strip()]
        if missing:
            raise ValidationError(
                f"Burger meal requires {', '.join(missing)}",
                "BURGER_VALIDATION_ERROR",
                {"missing": missing},
            )
        return BurgerMeal(
            bun=self._bun,
            patty=self._patty,
            side=self._side,
            toppings=tuple(self._toppings),
            cheese=self._cheese,
            drink=self._drink,
        )


def main() -> None:
    plain_burger = BurgerBuilder("wheat", "veg").build()

    burger_with_cheese = BurgerBuilder("wheat", "veg").with_cheese(True).build()

    loaded_burger = (
        BurgerBuilder("multigrain", "chicken")
        .with_cheese(True)
        .with_toppings(["lettuce", "onion", "jalapeno"])
        .with_side("fries")
        .with_drink("coke")
        .build()
    )

    for meal in (plain_burger, burger_with_cheese, loaded_burger):
        print(meal.describe())


if __name__ == "__main__":
    main()
