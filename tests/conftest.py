"""Shared pytest fixtures and stub collaborators for ordertaking tests."""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from typing import Any

import pytest

from ordertaking.domain.order import (
    CheckedAddress,
    OrderAcknowledgment,
    PricedOrder,
    SendResult,
    UnvalidatedAddress,
    UnvalidatedOrder,
)
from ordertaking.domain.simple_types import HtmlString
from ordertaking.infrastructure.catalog import StaticCatalog
from ordertaking.services.workflow import PlaceOrderWorkflow


class RecordingSender:
    """Acknowledgment sender stub that records what it was asked to send."""

    def __init__(self, result: SendResult = SendResult.SENT) -> None:
        self.result = result
        self.sent: list[OrderAcknowledgment] = []

    def __call__(self, acknowledgment: OrderAcknowledgment) -> SendResult:
        self.sent.append(acknowledgment)
        return self.result


def accept_address(address: UnvalidatedAddress) -> CheckedAddress:
    """Address-check stub: every address exists."""
    return CheckedAddress(**address.model_dump())


def render_letter(order: PricedOrder) -> HtmlString:
    return HtmlString.create(f"<p>Thanks for order {order.order_id}</p>")


def _address(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "addressLine1": "1 Main Street",
        "city": "Springfield",
        "zipCode": "12345",
    }
    data.update(overrides)
    return data


@pytest.fixture
def order_data() -> Callable[..., dict[str, Any]]:
    """Factory for wire-shaped (camelCase) order dicts.

    Defaults to one Widget line ``L1 / W1234 / 10``.
    """

    def _make(**overrides: Any) -> dict[str, Any]:
        data: dict[str, Any] = {
            "orderId": "ORD-001",
            "customerInfo": {
                "firstName": "Ada",
                "lastName": "Lovelace",
                "emailAddress": "ada@example.com",
            },
            "shippingAddress": _address(),
            "billingAddress": _address(addressLine2="Suite 9"),
            "lines": [{"orderLineId": "L1", "productCode": "W1234", "quantity": 10}],
        }
        data.update(overrides)
        return data

    return _make


@pytest.fixture
def make_order(order_data: Callable[..., dict[str, Any]]) -> Callable[..., UnvalidatedOrder]:
    def _make(**overrides: Any) -> UnvalidatedOrder:
        return UnvalidatedOrder.model_validate(order_data(**overrides))

    return _make


@pytest.fixture
def order(make_order: Callable[..., UnvalidatedOrder]) -> UnvalidatedOrder:
    return make_order()


@pytest.fixture
def catalog() -> StaticCatalog:
    return StaticCatalog.from_amounts({"W1234": Decimal("2.50"), "G123": Decimal("4.00")})


@pytest.fixture
def sender() -> RecordingSender:
    return RecordingSender()


@pytest.fixture
def make_workflow(
    catalog: StaticCatalog,
    sender: RecordingSender,
) -> Callable[..., PlaceOrderWorkflow]:
    """Workflow factory; keyword arguments replace individual collaborators."""

    def _make(**overrides: Any) -> PlaceOrderWorkflow:
        collaborators: dict[str, Any] = {
            "check_product_code_exists": catalog.check_product_code_exists,
            "check_address_exists": accept_address,
            "get_product_price": catalog.get_product_price,
            "create_letter": render_letter,
            "send_acknowledgment": sender,
        }
        collaborators.update(overrides)
        return PlaceOrderWorkflow(**collaborators)

    return _make
