"""Pricing stage — ValidatedOrder → PricedOrder.

line_price = quantity × unit price, re-validated as Price (0..1000).
amount_to_bill = Σ line_price, re-validated as BillingAmount (0..10000).

Arithmetic is exact Decimal. A result outside its range is reported as
PricingError, never clamped or rounded into range. (DESIGN.md Section 4.3)
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ordertaking.domain.errors import PricingError, ValidationError
from ordertaking.domain.order import PricedOrder, PricedOrderLine, ValidatedOrder, ValidatedOrderLine
from ordertaking.domain.simple_types import BillingAmount, Price, ProductCode
from ordertaking.services._helpers import line_field, remote_call

logger = logging.getLogger(__name__)

GetProductPrice = Callable[[ProductCode], Price]


class OrderPricer:
    """Prices validated orders using the injected price lookup."""

    def __init__(self, get_product_price: GetProductPrice) -> None:
        self._get_product_price = get_product_price

    def __call__(self, order: ValidatedOrder) -> PricedOrder:
        lines = [self.to_priced_line(line) for line in order.lines]
        try:
            amount_to_bill = BillingAmount.total(line.line_price for line in lines)
        except ValidationError as exc:
            raise PricingError("amount_to_bill", exc.raw_value, exc.reason) from exc

        logger.debug("Priced order %s: %s to bill", order.order_id, amount_to_bill)
        return PricedOrder(
            order_id=order.order_id,
            customer_info=order.customer_info,
            shipping_address=order.shipping_address,
            billing_address=order.billing_address,
            amount_to_bill=amount_to_bill,
            lines=lines,
        )

    def to_priced_line(self, line: ValidatedOrderLine) -> PricedOrderLine:
        with remote_call("get_product_price"):
            unit_price = self._get_product_price(line.product_code)

        field = line_field(str(line.order_line_id), "line_price")
        raw_price = line.quantity.to_decimal() * unit_price.value
        try:
            line_price = Price.create(raw_price, field=field)
        except ValidationError as exc:
            raise PricingError(field, raw_price, exc.reason) from exc

        return PricedOrderLine(
            order_line_id=line.order_line_id,
            product_code=line.product_code,
            quantity=line.quantity,
            line_price=line_price,
        )
