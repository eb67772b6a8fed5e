"""Chain of Responsibility pattern: customer support routing.

Without the pattern one ``SupportService`` checks the request type against
every department in a long conditional, so every new department edits it.

Each handler decides whether it can deal with a request and otherwise passes
it along. The sender only knows the head of the chain.
"""
from typing import Optional

from patternkit.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class SupportHandler:
    """Link in the support chain handling one request type."""

    name = "SupportHandler"
    request_type = ""
    action = ""

    def __init__(self):
        self.next_handler: Optional["SupportHandler"] = None

    def set_next(self, handler: "SupportHandler") -> "SupportHandler":
        """Link the next handler and return it so chains read left to right."""
        self.next_handler = handler
        return handler

    def can_handle(self, request_type: str) -> bool:
        return request_type.lower() == self.request_type

    def handle(self, request_type: str) -> Optional[str]:
        """
        Handle a request or forward it.

        Returns:
            The handling message, or None when no handler in the chain accepts it.
        """
        if self.can_handle(request_type):
            return f"{self.name}: {self.action}"
        if self.next_handler is not None:
            return self.next_handler.handle(request_type)
        logger.debug("Request fell off the chain", handler=self.name, request_type=request_type)
        return None


class GeneralSupport(SupportHandler):
    name = "GeneralSupport"
    request_type = "general"
    action = "Handling general query"


class BillingSupport(SupportHandler):
    name = "BillingSupport"
    request_type = "refund"
    action = "Handling refund request"


class TechnicalSupport(SupportHandler):
    name = "TechnicalSupport"
    request_type = "technical"
    action = "Handling technical issue"


class DeliverySupport(SupportHandler):
    name = "DeliverySupport"
    request_type = "delivery"
    action = "Handling delivery issue"


def build_support_chain() -> SupportHandler:
    """General -> Billing -> Technical -> Delivery."""
    head = GeneralSupport()
    head.set_next(BillingSupport()).set_next(TechnicalSupport()).set_next(DeliverySupport())
    return head


def submit(chain: SupportHandler, request_type: str) -> None:
    result = chain.handle(request_type)
    print(result if result is not None else f"No handler found for request: {request_type}")


def main() -> None:
    chain = build_support_chain()

    submit(chain, "refund")
    submit(chain, "delivery")
    submit(chain, "unknown")


if __name__ == "__main__":
    main()
