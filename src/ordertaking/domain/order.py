"""Order lifecycle shapes — Unvalidated, Validated, Priced.

Each stage of the place-order workflow consumes one shape and produces
the next (DESIGN.md Section 3). The shapes are distinct types rather than
flags on one record, so a function that accepts a :class:`PricedOrder`
cannot be handed an order that skipped validation.

- Unvalidated*: wire-shaped input. Raw strings and numbers, camelCase
  aliases accepted.
- Validated*: every field replaced by its primitive or compound type.
- Priced*: Validated plus ``line_price`` per line and ``amount_to_bill``.

INVARIANT: Validated and Priced orders are only built by the validation and
pricing stages in :mod:`ordertaking.services`.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    model_validator,
)
from pydantic.alias_generators import to_camel

from ordertaking.domain.compound_types import Address, CustomerInfo
from ordertaking.domain.simple_types import (
    BillingAmount,
    EmailAddress,
    HtmlString,
    OrderId,
    OrderLineId,
    OrderQuantity,
    Price,
    ProductCode,
    quantity_matches_code,
)

_WIRE_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

# ---------------------------------------------------------------------------
# Unvalidated (workflow input)
# ---------------------------------------------------------------------------


class UnvalidatedCustomerInfo(BaseModel):
    model_config = _WIRE_CONFIG

    first_name: str
    last_name: str
    email_address: str


class UnvalidatedAddress(BaseModel):
    model_config = _WIRE_CONFIG

    address_line1: str
    address_line2: str | None = None
    address_line3: str | None = None
    address_line4: str | None = None
    city: str
    zip_code: str


class CheckedAddress(UnvalidatedAddress):
    """Address confirmed to exist by the address-check service.

    Same fields as :class:`UnvalidatedAddress`, still unvalidated strings,
    but a distinct type: only the address collaborator produces one.
    """


class UnvalidatedOrderLine(BaseModel):
    model_config = _WIRE_CONFIG

    order_line_id: str
    product_code: str
    # kept exactly as received; the quantity constructors accept or reject it
    quantity: StrictInt | StrictFloat | StrictStr | StrictBool


class UnvalidatedOrder(BaseModel):
    """Raw order record as received from an untrusted boundary."""

    model_config = _WIRE_CONFIG

    order_id: str
    customer_info: UnvalidatedCustomerInfo
    shipping_address: UnvalidatedAddress
    billing_address: UnvalidatedAddress
    lines: list[UnvalidatedOrderLine] = Field(default_factory=list)


class PlaceOrderCommand(BaseModel):
    """An UnvalidatedOrder plus who asked for it and when."""

    model_config = _WIRE_CONFIG

    data: UnvalidatedOrder
    user_id: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))


# ---------------------------------------------------------------------------
# Validated
# ---------------------------------------------------------------------------


class _OrderLineBase(BaseModel):
    """Fields shared by validated and priced lines, plus the pairing invariant."""

    model_config = {"frozen": True}

    order_line_id: OrderLineId
    product_code: ProductCode
    quantity: OrderQuantity

    @model_validator(mode="after")
    def _quantity_kind_follows_product(self) -> _OrderLineBase:
        if not quantity_matches_code(self.product_code, self.quantity):
            msg = (
                f"{type(self.quantity).__name__} cannot be used with "
                f"{type(self.product_code).__name__} {self.product_code}"
            )
            raise ValueError(msg)
        return self


class ValidatedOrderLine(_OrderLineBase):
    pass


class ValidatedOrder(BaseModel):
    model_config = {"frozen": True}

    order_id: OrderId
    customer_info: CustomerInfo
    shipping_address: Address
    billing_address: Address
    lines: list[ValidatedOrderLine] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Priced
# ---------------------------------------------------------------------------


class PricedOrderLine(_OrderLineBase):
    line_price: Price


class PricedOrder(BaseModel):
    model_config = {"frozen": True}

    order_id: OrderId
    customer_info: CustomerInfo
    shipping_address: Address
    billing_address: Address
    amount_to_bill: BillingAmount
    lines: list[PricedOrderLine] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Acknowledgment
# ---------------------------------------------------------------------------


class OrderAcknowledgment(BaseModel):
    """Letter addressed to the customer, ready for the email service."""

    model_config = {"frozen": True}

    email_address: EmailAddress
    letter: HtmlString


class SendResult(StrEnum):
    """Outcome reported by the acknowledgment sender."""

    SENT = "Sent"
    NOT_SENT = "NotSent"
