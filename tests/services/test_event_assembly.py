"""Tests for event assembly from a priced order."""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal

from ordertaking.domain.events import BillableOrderPlaced, OrderAcknowledgmentSent, OrderPlaced
from ordertaking.domain.order import (
    CheckedAddress,
    PricedOrder,
    UnvalidatedAddress,
    UnvalidatedOrder,
)
from ordertaking.domain.simple_types import Price, ProductCode
from ordertaking.services.events import create_billing_event, create_events
from ordertaking.services.pricing import OrderPricer
from ordertaking.services.validation import OrderValidator


def _price(order: UnvalidatedOrder, unit_price: str) -> PricedOrder:
    def accept(address: UnvalidatedAddress) -> CheckedAddress:
        return CheckedAddress(**address.model_dump())

    def lookup(code: ProductCode) -> Price:
        return Price.create(Decimal(unit_price))

    validated = OrderValidator(lambda code: True, accept)(order)
    return OrderPricer(lookup)(validated)


def _ack(order: PricedOrder) -> OrderAcknowledgmentSent:
    return OrderAcknowledgmentSent(
        order_id=order.order_id, email_address=order.customer_info.email_address
    )


class TestBillingEvent:
    def test_positive_amount_is_billable(self, order: UnvalidatedOrder) -> None:
        priced = _price(order, "2.50")
        billing = create_billing_event(priced)
        assert billing == BillableOrderPlaced(
            order_id=priced.order_id,
            billing_address=priced.billing_address,
            amount_to_bill=priced.amount_to_bill,
        )

    def test_zero_amount_not_billable(self, order: UnvalidatedOrder) -> None:
        assert create_billing_event(_price(order, "0")) is None

    def test_smallest_positive_amount_is_billable(
        self, make_order: Callable[..., UnvalidatedOrder]
    ) -> None:
        order = make_order(lines=[{"orderLineId": "L1", "productCode": "W1234", "quantity": 1}])
        billing = create_billing_event(_price(order, "0.01"))
        assert billing is not None
        assert billing.amount_to_bill.value == Decimal("0.01")


class TestCreateEvents:
    def test_all_three(self, order: UnvalidatedOrder) -> None:
        priced = _price(order, "2.50")
        events = create_events(priced, _ack(priced))
        assert [type(e) for e in events] == [
            OrderPlaced,
            OrderAcknowledgmentSent,
            BillableOrderPlaced,
        ]

    def test_order_placed_carries_priced_order(self, order: UnvalidatedOrder) -> None:
        priced = _price(order, "2.50")
        placed = create_events(priced, None)[0]
        assert isinstance(placed, OrderPlaced)
        assert placed.order_id == priced.order_id
        assert placed.lines == priced.lines
        assert placed.amount_to_bill == priced.amount_to_bill

    def test_without_acknowledgment(self, order: UnvalidatedOrder) -> None:
        events = create_events(_price(order, "2.50"), None)
        assert [type(e) for e in events] == [OrderPlaced, BillableOrderPlaced]

    def test_nothing_to_bill(self, make_order: Callable[..., UnvalidatedOrder]) -> None:
        priced = _price(make_order(lines=[]), "1")
        events = create_events(priced, _ack(priced))
        assert [type(e) for e in events] == [OrderPlaced, OrderAcknowledgmentSent]

    def test_exactly_one_order_placed(self, order: UnvalidatedOrder) -> None:
        priced = _price(order, "2.50")
        events = create_events(priced, _ack(priced))
        assert sum(isinstance(e, OrderPlaced) for e in events) == 1

    def test_pure(self, order: UnvalidatedOrder) -> None:
        priced = _price(order, "2.50")
        assert create_events(priced, _ack(priced)) == create_events(priced, _ack(priced))
