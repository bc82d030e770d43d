"""Primitive value types — validated once, trusted everywhere after.

Each type wraps a single scalar in a frozen model. ``create()`` is the only
supported way to obtain one: it runs the pydantic constraints declared on
``value`` and translates any rejection into a domain
:class:`~ordertaking.domain.errors.ValidationError` naming the field, the
raw value, and the rule that failed.

INVARIANT: Two primitives of different kinds never compare equal, even when
they wrap the same scalar (``OrderId("A1") != OrderLineId("A1")``).
"""

from __future__ import annotations

import functools
import re
from collections.abc import Iterable
from decimal import Decimal
from typing import Annotated, Any, Literal, Self

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StringConstraints
from pydantic import ValidationError as PydanticValidationError

from ordertaking.domain.errors import ValidationError

# --- Patterns ---

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
ZIP_CODE_PATTERN = r"^[0-9]{5}$"
WIDGET_CODE_PATTERN = r"^W[0-9]{4}$"
GIZMO_CODE_PATTERN = r"^G[0-9]{3}$"

# --- Numeric bounds ---

UNIT_QUANTITY_MIN = 1
UNIT_QUANTITY_MAX = 1000
KILOGRAM_QUANTITY_MIN = 0.05
KILOGRAM_QUANTITY_MAX = 100.0
PRICE_MAX = Decimal("1000")
BILLING_AMOUNT_MAX = Decimal("10000")


_NUMBER_TEXT = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?")


def _reject_bool(raw: Any) -> Any:
    if isinstance(raw, bool):
        msg = "Input should be a number, not a boolean"
        raise ValueError(msg)
    return raw


def _number_from_text(raw: Any) -> Any:
    """Parse plain decimal text (``"7"``, ``"2.5"``); anything else is returned as is."""
    raw = _reject_bool(raw)
    if isinstance(raw, str) and _NUMBER_TEXT.fullmatch(raw):
        return int(raw) if raw.lstrip("+-").isdigit() else float(raw)
    return raw


def _integral_float_to_int(raw: Any) -> Any:
    """Accept ``10.0`` as a unit count; wire numbers carry no int/float split."""
    raw = _number_from_text(raw)
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    return raw


@functools.total_ordering
class SimpleValue(BaseModel):
    """Base for single-scalar domain primitives."""

    model_config = ConfigDict(frozen=True)

    value: Any

    @classmethod
    def create(cls, raw: Any, *, field: str | None = None) -> Self:
        """Validate *raw* and wrap it.

        Raises:
            ValidationError: If *raw* violates this type's rule. ``field``
                defaults to the type name.
        """
        try:
            return cls(value=raw)
        except PydanticValidationError as exc:
            reason = exc.errors()[0]["msg"]
            raise ValidationError(field or cls.__name__, raw, reason) from exc

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(self.value < other.value)  # type: ignore[attr-defined]

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------

_Str50 = Annotated[str, StringConstraints(strict=True, min_length=1, max_length=50)]


class String50(SimpleValue):
    """Non-empty string of at most 50 characters."""

    value: _Str50

    @classmethod
    def create_optional(cls, raw: str | None, *, field: str | None = None) -> Self | None:
        """Like :meth:`create`, but ``None`` and ``""`` mean "absent"."""
        if raw is None or raw == "":
            return None
        return cls.create(raw, field=field)


class EmailAddress(SimpleValue):
    value: Annotated[str, StringConstraints(strict=True, pattern=EMAIL_PATTERN)]


class ZipCode(SimpleValue):
    """US five-digit zip code."""

    value: Annotated[str, StringConstraints(strict=True, pattern=ZIP_CODE_PATTERN)]


class OrderId(SimpleValue):
    value: _Str50


class OrderLineId(SimpleValue):
    value: _Str50


class HtmlString(SimpleValue):
    """Rendered acknowledgment letter. Opaque to the workflow."""

    value: Annotated[str, StringConstraints(strict=True)]


# ---------------------------------------------------------------------------
# Product codes
# ---------------------------------------------------------------------------


class WidgetCode(SimpleValue):
    """``W`` followed by four digits. Widgets are counted in whole units."""

    value: Annotated[str, StringConstraints(strict=True, pattern=WIDGET_CODE_PATTERN)]
    kind: Literal["widget"] = "widget"


class GizmoCode(SimpleValue):
    """``G`` followed by three digits. Gizmos are sold by the kilogram."""

    value: Annotated[str, StringConstraints(strict=True, pattern=GIZMO_CODE_PATTERN)]
    kind: Literal["gizmo"] = "gizmo"


# tagged by `kind` so a serialized code reloads as the same variant
ProductCode = Annotated[WidgetCode | GizmoCode, Field(discriminator="kind")]


def create_product_code(raw: Any, *, field: str = "ProductCode") -> ProductCode:
    """Parse *raw* into the product-code variant its leading letter selects."""
    if isinstance(raw, str) and raw.startswith("W"):
        return WidgetCode.create(raw, field=field)
    if isinstance(raw, str) and raw.startswith("G"):
        return GizmoCode.create(raw, field=field)
    raise ValidationError(field, raw, "unrecognized product code format")


# ---------------------------------------------------------------------------
# Quantities
# ---------------------------------------------------------------------------


class UnitQuantity(SimpleValue):
    """Whole-unit count, 1..1000 inclusive."""

    value: Annotated[
        int,
        BeforeValidator(_integral_float_to_int),
        Field(strict=True, ge=UNIT_QUANTITY_MIN, le=UNIT_QUANTITY_MAX),
    ]
    kind: Literal["unit"] = "unit"

    def to_decimal(self) -> Decimal:
        return Decimal(self.value)


class KilogramQuantity(SimpleValue):
    """Weight in kilograms, 0.05..100.0 inclusive."""

    value: Annotated[
        float,
        BeforeValidator(_number_from_text),
        Field(strict=True, ge=KILOGRAM_QUANTITY_MIN, le=KILOGRAM_QUANTITY_MAX, allow_inf_nan=False),
    ]
    kind: Literal["kilogram"] = "kilogram"

    def to_decimal(self) -> Decimal:
        # str() keeps the shortest round-tripping repr (0.1 -> Decimal("0.1"))
        return Decimal(str(self.value))


# tagged by `kind`: {"value": 3.0} alone would reload as UnitQuantity
OrderQuantity = Annotated[UnitQuantity | KilogramQuantity, Field(discriminator="kind")]


def to_order_quantity(
    product_code: ProductCode,
    raw: Any,
    *,
    field: str = "OrderQuantity",
) -> OrderQuantity:
    """Parse *raw* as the quantity kind that *product_code* requires.

    Widget codes always yield :class:`UnitQuantity`; Gizmo codes always
    yield :class:`KilogramQuantity`.
    """
    if isinstance(product_code, WidgetCode):
        return UnitQuantity.create(raw, field=field)
    return KilogramQuantity.create(raw, field=field)


def quantity_matches_code(product_code: ProductCode, quantity: OrderQuantity) -> bool:
    """Check the Widget/UnitQuantity and Gizmo/KilogramQuantity pairing."""
    if isinstance(product_code, WidgetCode):
        return isinstance(quantity, UnitQuantity)
    return isinstance(quantity, KilogramQuantity)


# ---------------------------------------------------------------------------
# Money
# ---------------------------------------------------------------------------

_Money = BeforeValidator(_reject_bool)


class Price(SimpleValue):
    """Monetary amount for one product or one order line, 0..1000."""

    value: Annotated[Decimal, _Money, Field(ge=0, le=PRICE_MAX, allow_inf_nan=False)]


class BillingAmount(SimpleValue):
    """Total amount to bill for an order, 0..10000."""

    value: Annotated[Decimal, _Money, Field(ge=0, le=BILLING_AMOUNT_MAX, allow_inf_nan=False)]

    @classmethod
    def total(cls, prices: Iterable[Price], *, field: str = "amount_to_bill") -> Self:
        """Sum *prices* exactly and validate the total."""
        return cls.create(sum((p.value for p in prices), Decimal(0)), field=field)
