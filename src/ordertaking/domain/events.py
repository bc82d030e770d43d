"""Domain events emitted by a successful place-order run.

- OrderPlaced: always exactly one; carries the whole priced order.
- BillableOrderPlaced: only when ``amount_to_bill > 0``; for billing.
- OrderAcknowledgmentSent: only when the customer notice went out.

Events have no random ids or timestamps, so assembling them stays a pure
function of the priced order and the acknowledgment outcome.
"""

from __future__ import annotations

from typing import Annotated, Literal, Self

from pydantic import BaseModel, Field

from ordertaking.domain.compound_types import Address
from ordertaking.domain.order import PricedOrder
from ordertaking.domain.simple_types import BillingAmount, EmailAddress, OrderId


class OrderPlaced(PricedOrder):
    """The priced order, published to downstream contexts (shipping, etc.)."""

    event_type: Literal["order_placed"] = "order_placed"

    @classmethod
    def from_priced_order(cls, order: PricedOrder) -> Self:
        # dict(model) is shallow; nested values stay validated instances
        return cls(**dict(order))


class BillableOrderPlaced(BaseModel):
    """Tells the billing context how much to charge and where to send it."""

    model_config = {"frozen": True}

    event_type: Literal["billable_order_placed"] = "billable_order_placed"
    order_id: OrderId
    billing_address: Address
    amount_to_bill: BillingAmount


class OrderAcknowledgmentSent(BaseModel):
    model_config = {"frozen": True}

    event_type: Literal["order_acknowledgment_sent"] = "order_acknowledgment_sent"
    order_id: OrderId
    email_address: EmailAddress


PlaceOrderEvent = Annotated[
    OrderPlaced | BillableOrderPlaced | OrderAcknowledgmentSent,
    Field(discriminator="event_type"),
]
