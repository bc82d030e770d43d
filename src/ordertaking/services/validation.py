"""Validation stage — UnvalidatedOrder → ValidatedOrder.

Configured once with two collaborators, then applied to orders:

- ``check_product_code_exists(ProductCode) -> bool``: pure catalog lookup.
  ``False`` is a validation failure, not an exception.
- ``check_address_exists(UnvalidatedAddress) -> CheckedAddress``: remote
  address service. It raises AddressValidationError for a definite "no";
  any other failure becomes RemoteServiceError.

All-or-nothing and fail-fast: the first field or line that does not convert
raises, and no partially validated order is ever produced.
(DESIGN.md Section 4.2)
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ordertaking.domain.compound_types import Address, CustomerInfo, PersonalName
from ordertaking.domain.errors import AddressValidationError, ValidationError
from ordertaking.domain.order import (
    CheckedAddress,
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
    ValidatedOrder,
    ValidatedOrderLine,
)
from ordertaking.domain.simple_types import (
    EmailAddress,
    OrderId,
    OrderLineId,
    ProductCode,
    String50,
    ZipCode,
    create_product_code,
    to_order_quantity,
)
from ordertaking.services._helpers import line_field, remote_call

logger = logging.getLogger(__name__)

CheckProductCodeExists = Callable[[ProductCode], bool]
CheckAddressExists = Callable[[UnvalidatedAddress], CheckedAddress]


class OrderValidator:
    """Turns raw orders into validated ones using the injected checks."""

    def __init__(
        self,
        check_product_code_exists: CheckProductCodeExists,
        check_address_exists: CheckAddressExists,
    ) -> None:
        self._check_product_code_exists = check_product_code_exists
        self._check_address_exists = check_address_exists

    def __call__(self, order: UnvalidatedOrder) -> ValidatedOrder:
        """Validate *order*.

        Raises:
            ValidationError: On the first field or line that fails.
            RemoteServiceError: If a collaborator call itself fails.
        """
        logger.debug("Validating order %r with %d lines", order.order_id, len(order.lines))
        try:
            return ValidatedOrder(
                order_id=OrderId.create(order.order_id, field="order_id"),
                customer_info=self.to_customer_info(order.customer_info),
                shipping_address=self.to_address(order.shipping_address, field="shipping_address"),
                billing_address=self.to_address(order.billing_address, field="billing_address"),
                lines=[self.to_validated_line(line) for line in order.lines],
            )
        except ValidationError as exc:
            logger.debug("Order %r failed validation: %s", order.order_id, exc)
            raise

    # ------------------------------------------------------------------
    # Field conversions
    # ------------------------------------------------------------------

    @staticmethod
    def to_customer_info(customer: UnvalidatedCustomerInfo) -> CustomerInfo:
        return CustomerInfo(
            name=PersonalName(
                first_name=String50.create(customer.first_name, field="customer_info.first_name"),
                last_name=String50.create(customer.last_name, field="customer_info.last_name"),
            ),
            email_address=EmailAddress.create(
                customer.email_address, field="customer_info.email_address"
            ),
        )

    def to_address(self, address: UnvalidatedAddress, *, field: str) -> Address:
        """Confirm *address* exists, then validate what the service returned."""
        try:
            with remote_call("check_address_exists", passthrough=(AddressValidationError,)):
                checked = self._check_address_exists(address)
        except AddressValidationError as exc:
            raise ValidationError(field, address.model_dump(), exc.reason) from exc

        return Address(
            address_line1=String50.create(checked.address_line1, field=f"{field}.address_line1"),
            address_line2=String50.create_optional(
                checked.address_line2, field=f"{field}.address_line2"
            ),
            address_line3=String50.create_optional(
                checked.address_line3, field=f"{field}.address_line3"
            ),
            address_line4=String50.create_optional(
                checked.address_line4, field=f"{field}.address_line4"
            ),
            city=String50.create(checked.city, field=f"{field}.city"),
            zip_code=ZipCode.create(checked.zip_code, field=f"{field}.zip_code"),
        )

    def to_product_code(self, raw: str, *, field: str) -> ProductCode:
        """Parse *raw* and require the catalog to know it."""
        product_code = create_product_code(raw, field=field)
        with remote_call("check_product_code_exists"):
            exists = self._check_product_code_exists(product_code)
        if not exists:
            raise ValidationError(field, raw, "product code does not exist")
        return product_code

    def to_validated_line(self, line: UnvalidatedOrderLine) -> ValidatedOrderLine:
        line_id = line.order_line_id
        try:
            order_line_id = OrderLineId.create(line_id, field=line_field(line_id, "order_line_id"))
            product_code = self.to_product_code(
                line.product_code, field=line_field(line_id, "product_code")
            )
            # the validated code picks unit vs kilogram parsing
            quantity = to_order_quantity(
                product_code, line.quantity, field=line_field(line_id, "quantity")
            )
        except ValidationError as exc:
            exc.order_line_id = line_id
            raise
        return ValidatedOrderLine(
            order_line_id=order_line_id,
            product_code=product_code,
            quantity=quantity,
        )
