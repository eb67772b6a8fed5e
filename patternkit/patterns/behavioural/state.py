"""State pattern: food order lifecycle.

Without the pattern an ``Order`` keeps its state as a string and switches on
it inside ``next_state()`` and ``cancel_order()``. Every new state means
editing both methods, and the rules for what may happen in which state are
scattered across conditionals.

Here the rules are a single transition table consumed by a generic state
machine. Adding a state is adding a row.
"""
from enum import Enum
from typing import List

from patternkit.domain.base.exceptions import IllegalTransitionError
from patternkit.domain.state import StateMachine, Transition, TransitionTable


class OrderStatus(str, Enum):
    """Order lifecycle states."""
    PLACED = "ORDER_PLACED"
    PREPARING = "PREPARING"
    OUT_FOR_DELIVERY = "OUT_FOR_DELIVERY"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class OrderEvent(str, Enum):
    """Events an order reacts to."""
    NEXT = "next"
    CANCEL = "cancel"


ORDER_TRANSITIONS = TransitionTable(
    {
        OrderStatus.PLACED: {
            OrderEvent.NEXT: Transition(OrderStatus.PREPARING, "Order is now being prepared."),
            OrderEvent.CANCEL: Transition(OrderStatus.CANCELLED, "Order has been cancelled."),
        },
        OrderStatus.PREPARING: {
            OrderEvent.NEXT: Transition(OrderStatus.OUT_FOR_DELIVERY, "Order is out for delivery."),
            OrderEvent.CANCEL: Transition(OrderStatus.CANCELLED, "Order has been cancelled."),
        },
        OrderStatus.OUT_FOR_DELIVERY: {
            OrderEvent.NEXT: Transition(OrderStatus.DELIVERED, "Order has been delivered."),
        },
        OrderStatus.DELIVERED: {},  # Terminal state
        OrderStatus.CANCELLED: {},  # Terminal state
    },
    refusals={
        OrderStatus.OUT_FOR_DELIVERY: {
            OrderEvent.CANCEL: "Cannot cancel. Order is out for delivery.",
        },
        OrderStatus.DELIVERED: {
            OrderEvent.NEXT: "Order is already delivered.",
            OrderEvent.CANCEL: "Cannot cancel a delivered order.",
        },
        OrderStatus.CANCELLED: {
            OrderEvent.NEXT: "Cancelled order cannot move to next state.",
            OrderEvent.CANCEL: "Order is already cancelled.",
        },
    },
)


class OrderContext:
    """An order whose behaviour depends on its current status."""

    def __init__(self, order_id: str = "order-1"):
        self._machine: StateMachine[OrderStatus, OrderEvent] = StateMachine(
            table=ORDER_TRANSITIONS,
            state=OrderStatus.PLACED,
            aggregate_id=order_id,
            aggregate_type="Order",
        )

    @property
    def status(self) -> OrderStatus:
        return self._machine.state

    @property
    def current_state(self) -> str:
        return self._machine.state.value

    @property
    def history(self) -> List[dict]:
        return list(self._machine.lifecycle_events)

    def next(self) -> str:
        """Advance the order. Raises IllegalTransitionError from terminal states."""
        return self._machine.transition(OrderEvent.NEXT).message

    def cancel(self) -> str:
        """Cancel the order. Only allowed before it leaves the kitchen."""
        return self._machine.transition(OrderEvent.CANCEL).message

    def can_cancel(self) -> bool:
        return self._machine.can_transition(OrderEvent.CANCEL)

    def pull_events(self):
        return self._machine.pull_events()


def _apply(order: OrderContext, event: OrderEvent) -> None:
    action = order.next if event is OrderEvent.NEXT else order.cancel
    try:
        print(action())
    except IllegalTransitionError as e:
        print(e.message)


def main() -> None:
    order = OrderContext()

    print(f"Current State: {order.current_state}")

    _apply(order, OrderEvent.NEXT)
    _apply(order, OrderEvent.NEXT)
    _apply(order, OrderEvent.CANCEL)  # refused, out for delivery
    _apply(order, OrderEvent.NEXT)
    _apply(order, OrderEvent.CANCEL)  # refused, delivered

    print(f"Final State: {order.current_state}")


if __name__ == "__main__":
    main()
