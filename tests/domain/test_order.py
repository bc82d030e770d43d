"""Tests for the order lifecycle shapes."""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from typing import Any

import pytest
from pydantic import ValidationError as PydanticValidationError

from ordertaking.domain.compound_types import Address
from ordertaking.domain.order import (
    CheckedAddress,
    PlaceOrderCommand,
    PricedOrderLine,
    SendResult,
    UnvalidatedAddress,
    UnvalidatedOrder,
    ValidatedOrderLine,
)
from ordertaking.domain.simple_types import (
    GizmoCode,
    KilogramQuantity,
    OrderLineId,
    Price,
    String50,
    UnitQuantity,
    WidgetCode,
    ZipCode,
)


class TestUnvalidatedOrder:
    def test_accepts_camel_case_wire_keys(self, order_data: Callable[..., dict[str, Any]]) -> None:
        order = UnvalidatedOrder.model_validate(order_data())
        assert order.order_id == "ORD-001"
        assert order.customer_info.email_address == "ada@example.com"
        assert order.billing_address.address_line2 == "Suite 9"
        assert order.lines[0].product_code == "W1234"

    def test_accepts_snake_case_names(self) -> None:
        address = UnvalidatedAddress(address_line1="1 Main", city="Town", zip_code="12345")
        assert address.address_line2 is None

    def test_lines_default_empty(self, order_data: Callable[..., dict[str, Any]]) -> None:
        data = order_data()
        del data["lines"]
        assert UnvalidatedOrder.model_validate(data).lines == []

    def test_raw_values_are_not_checked(self, make_order: Callable[..., UnvalidatedOrder]) -> None:
        order = make_order(orderId="", lines=[{"orderLineId": "", "productCode": "??", "quantity": -1}])
        assert order.order_id == ""
        assert order.lines[0].quantity == -1

    @pytest.mark.parametrize("raw", [True, "10", 2.5, 7])
    def test_quantity_kept_as_received(
        self, make_order: Callable[..., UnvalidatedOrder], raw: Any
    ) -> None:
        order = make_order(lines=[{"orderLineId": "L1", "productCode": "W1234", "quantity": raw}])
        assert order.lines[0].quantity == raw
        assert type(order.lines[0].quantity) is type(raw)


class TestCheckedAddress:
    def test_distinct_from_unvalidated(self) -> None:
        raw = UnvalidatedAddress(address_line1="1 Main", city="Town", zip_code="12345")
        checked = CheckedAddress(**raw.model_dump())
        assert isinstance(checked, UnvalidatedAddress)
        assert not isinstance(raw, CheckedAddress)


class TestLineInvariant:
    def test_widget_with_units(self) -> None:
        line = ValidatedOrderLine(
            order_line_id=OrderLineId.create("L1"),
            product_code=WidgetCode.create("W1234"),
            quantity=UnitQuantity.create(2),
        )
        assert isinstance(line.quantity, UnitQuantity)

    def test_widget_with_kilograms_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            ValidatedOrderLine(
                order_line_id=OrderLineId.create("L1"),
                product_code=WidgetCode.create("W1234"),
                quantity=KilogramQuantity.create(2.0),
            )

    def test_priced_gizmo_with_units_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            PricedOrderLine(
                order_line_id=OrderLineId.create("L1"),
                product_code=GizmoCode.create("G123"),
                quantity=UnitQuantity.create(2),
                line_price=Price.create(Decimal("1")),
            )

    def test_validated_and_priced_lines_are_different_types(self) -> None:
        assert not issubclass(PricedOrderLine, ValidatedOrderLine)
        assert not issubclass(ValidatedOrderLine, PricedOrderLine)


class TestAddress:
    def test_optional_lines(self) -> None:
        address = Address(
            address_line1=String50.create("1 Main"),
            city=String50.create("Town"),
            zip_code=ZipCode.create("12345"),
        )
        assert address.address_line2 is None
        assert address.address_line4 is None


class TestPlaceOrderCommand:
    def test_wraps_order_with_defaults(self, order_data: Callable[..., dict[str, Any]]) -> None:
        command = PlaceOrderCommand.model_validate({"data": order_data(), "userId": "u-1"})
        assert command.user_id == "u-1"
        assert command.data.order_id == "ORD-001"
        assert command.timestamp.tzinfo is not None


class TestSendResult:
    def test_members(self) -> None:
        assert {r.value for r in SendResult} == {"Sent", "NotSent"}

    def test_plain_strings_compare_equal(self) -> None:
        assert SendResult.SENT == "Sent"
        assert SendResult("NotSent") is SendResult.NOT_SENT
