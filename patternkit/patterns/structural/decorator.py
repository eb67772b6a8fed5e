"""Decorator pattern: pizza toppings.

One subclass per topping combination (``MargheritaWithCheeseAndOlives``...)
explodes combinatorially.

Toppings wrap any ``Pizza`` and add to its description and cost, so they can
be stacked in any order at runtime. Each decorator adds its price, so the
total does not depend on the wrap order.
"""
from abc import ABC, abstractmethod


class Pizza(ABC):
    @abstractmethod
    def get_description(self) -> str:
        ...

    @abstractmethod
    def get_cost(self) -> float:
        ...


class PlainPizza(Pizza):
    def get_description(self) -> str:
        return "Plain Pizza"

    def get_cost(self) -> float:
        return 5.0


class MargheritaPizza(Pizza):
    def get_description(self) -> str:
        return "Margherita Pizza"

    def get_cost(self) -> float:
        return 7.0


class PizzaDecorator(Pizza):
    """Adds a named extra with a fixed price to the wrapped pizza."""

    label = ""
    price = 0.0

    def __init__(self, pizza: Pizza):
        self.pizza = pizza

    def get_description(self) -> str:
        return f"{self.pizza.get_description()}, {self.label}"

    def get_cost(self) -> float:
        return self.pizza.get_cost() + self.price


class ExtraCheese(PizzaDecorator):
    label = "Extra Cheese"
    price = 1.5


class Olives(PizzaDecorator):
    label = "Olives"
    price = 1.0


def main() -> None:
    pizza = ExtraCheese(Olives(MargheritaPizza()))

    print("Order Details:")
    print(f"Description: {pizza.get_description()}")
    print(f"Total Cost: ${pizza.get_cost()}")


if __name__ == "__main__":
    main()
