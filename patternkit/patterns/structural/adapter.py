"""Adapter pattern: plugging a third-party payment API into checkout.

``RazorpayAPI`` exposes ``make_payment(invoice_id, amount_in_rupees)`` while
checkout expects ``PaymentGateway.pay(order_id, amount)``. Calling Razorpay
directly from checkout would mean branching on the provider everywhere a
payment is made.

``RazorpayAdapter`` implements the expected interface and translates calls to
the third-party API, so checkout stays unaware of it.
"""
from abc import ABC, abstractmethod
from typing import Optional


class PaymentGateway(ABC):
    @abstractmethod
    def pay(self, order_id: str, amount: float) -> str:
        ...


class PayUGateway(PaymentGateway):
    def pay(self, order_id: str, amount: float) -> str:
        return f"Paid Rs.{amount} using PayU for order: {order_id}"


class RazorpayAPI:
    """Third-party SDK with its own method names."""

    def make_payment(self, invoice_id: str, amount_in_rupees: float) -> str:
        return f"Paid Rs.{amount_in_rupees} using Razorpay for invoice: {invoice_id}"


class RazorpayAdapter(PaymentGateway):
    def __init__(self, api: Optional[RazorpayAPI] = None):
        self.api = api or RazorpayAPI()

    def pay(self, order_id: str, amount: float) -> str:
        return self.api.make_payment(order_id, amount)


class CheckoutService:
    def __init__(self, payment_gateway: PaymentGateway):
        self.payment_gateway = payment_gateway

    def checkout(self, order_id: str, amount: float) -> str:
        result = self.payment_gateway.pay(order_id, amount)
        print(result)
        return result


def main() -> None:
    CheckoutService(RazorpayAdapter()).checkout("12", 1780.0)
    CheckoutService(PayUGateway()).checkout("13", 499.0)


if __name__ == "__main__":
    main()
