"""Abstract Factory pattern: region-specific checkout.

A checkout service that picks the gateway and invoice with nested
conditionals on region and gateway name can easily pair a US invoice with an
Indian gateway, and grows with every region.

Each region factory creates a consistent family of products: the payment
gateways available in that region and its invoice type.
"""
from abc import ABC, abstractmethod
from typing import Callable, List

from patternkit.domain.base.exceptions import NotFoundError
from patternkit.infrastructure.registry import CapabilityRegistry, case_insensitive


class UnsupportedGatewayError(NotFoundError):
    """Raised when a region does not offer the requested gateway."""

    def __init__(self, region: str, gateway_type: str, available: List[str]):
        super().__init__(f"Payment gateway for {region}", gateway_type, available)
        self.region = region


# Payment gateways

class PaymentGateway(ABC):
    @abstractmethod
    def process_payment(self, amount: float) -> str:
        ...


class RazorpayGateway(PaymentGateway):
    def process_payment(self, amount: float) -> str:
        return f"Processing INR payment via Razorpay: {amount}"


class PayUGateway(PaymentGateway):
    def process_payment(self, amount: float) -> str:
        return f"Processing INR payment via PayU: {amount}"


class PayPalGateway(PaymentGateway):
    def process_payment(self, amount: float) -> str:
        return f"Processing USD payment via PayPal: {amount}"


# Invoices

class Invoice(ABC):
    @abstractmethod
    def generate_invoice(self) -> str:
        ...


class GSTInvoice(Invoice):
    def generate_invoice(self) -> str:
        return "Generating GST Invoice for India."


class USInvoice(Invoice):
    def generate_invoice(self) -> str:
        return "Generating US Invoice for USA."


# Region factories

class RegionFactory(ABC):
    """Creates the gateway and invoice family for one region."""

    region = ""

    def __init__(self):
        self._gateways: CapabilityRegistry[Callable[[], PaymentGateway]] = CapabilityRegistry(
            f"{self.region} payment gateway", normalize=case_insensitive
        )
        self.register_gateways(self._gateways)

    @abstractmethod
    def register_gateways(self, gateways: CapabilityRegistry) -> None:
        """Register the gateways offered in this region."""

    @abstractmethod
    def create_invoice(self) -> Invoice:
        ...

    def create_payment_gateway(self, gateway_type: str) -> PaymentGateway:
        if not self._gateways.is_registered(gateway_type):
            raise UnsupportedGatewayError(
                self.region, gateway_type, self._gateways.registered_labels()
            )
        return self._gateways.invoke(gateway_type)

    def supported_gateways(self) -> List[str]:
        return self._gateways.registered_labels()


class IndiaRegionFactory(RegionFactory):
    region = "India"

    def register_gateways(self, gateways: CapabilityRegistry) -> None:
        gateways.register("razorpay", RazorpayGateway)
        gateways.register("payu", PayUGateway)

    def create_invoice(self) -> Invoice:
        return GSTInvoice()


class USRegionFactory(RegionFactory):
    region = "USA"

    def register_gateways(self, gateways: CapabilityRegistry) -> None:
        gateways.register("paypal", PayPalGateway)

    def create_invoice(self) -> Invoice:
        return USInvoice()


class CheckoutService:
    """Client that only talks to the abstract factory and products."""

    def __init__(self, factory: RegionFactory, gateway_type: str):
        self.gateway_type = gateway_type
        self.payment_gateway = factory.create_payment_gateway(gateway_type)
        self.invoice = factory.create_invoice()

    def complete_order(self, amount: float) -> List[str]:
        lines = [
            self.payment_gateway.process_payment(amount),
            self.invoice.generate_invoice(),
        ]
        for line in lines:
            print(line)
        return lines


def main() -> None:
    india_checkout = CheckoutService(IndiaRegionFactory(), "razorpay")
    india_checkout.complete_order(100.0)

    us_checkout = CheckoutService(USRegionFactory(), "paypal")
    us_checkout.complete_order(100.0)


if __name__ == "__main__":
    main()
