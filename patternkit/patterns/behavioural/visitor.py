"""Visitor pattern: operations over cart items.

Putting ``generate_invoice()`` and ``shipping_cost()`` on every item class
means each new operation touches every item type, and item classes fill up
with unrelated concerns.

Items only know how to ``accept`` a visitor. Each operation is a visitor whose
``visit`` dispatches on the concrete item type.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import singledispatchmethod
from typing import List


class Item(ABC):
    @abstractmethod
    def accept(self, visitor: "ItemVisitor") -> str:
        ...


@dataclass(frozen=True)
class PhysicalProduct(Item):
    name: str
    weight: float

    def accept(self, visitor: "ItemVisitor") -> str:
        return visitor.visit(self)


@dataclass(frozen=True)
class DigitalProduct(Item):
    name: str
    download_size_mb: int

    def accept(self, visitor: "ItemVisitor") -> str:
        return visitor.visit(self)


@dataclass(frozen=True)
class GiftCard(Item):
    code: str
    amount: float

    def accept(self, visitor: "ItemVisitor") -> str:
        return visitor.visit(self)


class ItemVisitor(ABC):
    """Operation applied to every kind of item."""

    @singledispatchmethod
    def visit(self, item: Item) -> str:
        raise TypeError(f"{type(self).__name__} cannot visit {type(item).__name__}")


class InvoiceVisitor(ItemVisitor):
    @singledispatchmethod
    def visit(self, item: Item) -> str:
        return super().visit(item)

    @visit.register
    def _(self, item: PhysicalProduct) -> str:
        return f"Invoice: {item.name} - Shipping to customer"

    @visit.register
    def _(self, item: DigitalProduct) -> str:
        return f"Invoice: {item.name} - Email with download link"

    @visit.register
    def _(self, item: GiftCard) -> str:
        return f"Invoice: Gift Card - Code: {item.code}"


class ShippingCostVisitor(ItemVisitor):
    RATE_PER_KG = 10

    @singledispatchmethod
    def visit(self, item: Item) -> str:
        return super().visit(item)

    @visit.register
    def _(self, item: PhysicalProduct) -> str:
        return f"Shipping cost for {item.name}: Rs. {self.cost(item)}"

    @visit.register
    def _(self, item: DigitalProduct) -> str:
        return f"{item.name} is digital -- No shipping cost."

    @visit.register
    def _(self, item: GiftCard) -> str:
        return "GiftCard delivery via email -- No shipping cost."

    def cost(self, item: PhysicalProduct) -> float:
        return round(item.weight * self.RATE_PER_KG, 2)


def main() -> None:
    items: List[Item] = [
        PhysicalProduct("Shoes", 1.2),
        DigitalProduct("Ebook", 100),
        GiftCard("TUF500", 500),
    ]

    invoice_generator = InvoiceVisitor()
    shipping_calculator = ShippingCostVisitor()

    for item in items:
        print(item.accept(invoice_generator))
        print(item.accept(shipping_calculator))
        print()


if __name__ == "__main__":
    main()
