"""Event assembly — PricedOrder (+ acknowledgment outcome) → event list.

Output order: [OrderPlaced, OrderAcknowledgmentSent?, BillableOrderPlaced?].
Consumers must not depend on it.
"""

from __future__ import annotations

from ordertaking.domain.events import (
    BillableOrderPlaced,
    OrderAcknowledgmentSent,
    OrderPlaced,
    PlaceOrderEvent,
)
from ordertaking.domain.order import PricedOrder


def create_billing_event(order: PricedOrder) -> BillableOrderPlaced | None:
    """Billing event for *order*, or None when there is nothing to bill."""
    if order.amount_to_bill.value > 0:
        return BillableOrderPlaced(
            order_id=order.order_id,
            billing_address=order.billing_address,
            amount_to_bill=order.amount_to_bill,
        )
    return None


def create_events(
    order: PricedOrder,
    acknowledgment: OrderAcknowledgmentSent | None,
) -> list[PlaceOrderEvent]:
    events: list[PlaceOrderEvent] = [OrderPlaced.from_priced_order(order)]
    if acknowledgment is not None:
        events.append(acknowledgment)
    billing = create_billing_event(order)
    if billing is not None:
        events.append(billing)
    return events
