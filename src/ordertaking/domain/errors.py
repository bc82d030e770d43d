"""Error taxonomy for the place-order workflow.

Three failures end a workflow run (DESIGN.md Section 5):
- ValidationError: a raw field broke a domain rule, or an existence check failed.
- PricingError: a computed price fell outside its bounded range.
- RemoteServiceError: a collaborator call failed; the outcome is unknown, not invalid.

A failed acknowledgment send is deliberately absent from this list.
"""

from __future__ import annotations

from typing import Any


class PlaceOrderError(Exception):
    """Base for every error that short-circuits the workflow."""

    code: str = "PLACE_ORDER_FAILED"

    def detail(self) -> dict[str, Any]:
        """Structured context for the error payload."""
        return {}


class ValidationError(PlaceOrderError):
    """A raw value failed its smart constructor or an existence check."""

    code = "VALIDATION_FAILED"

    def __init__(
        self,
        field: str,
        raw_value: Any,
        reason: str,
        *,
        order_line_id: str | None = None,
    ) -> None:
        self.field = field
        self.raw_value = raw_value
        self.reason = reason
        self.order_line_id = order_line_id
        super().__init__(f"Invalid {field} {raw_value!r}: {reason}")

    def detail(self) -> dict[str, Any]:
        detail: dict[str, Any] = {
            "field": self.field,
            "raw_value": self.raw_value,
            "reason": self.reason,
        }
        if self.order_line_id is not None:
            detail["order_line_id"] = self.order_line_id
        return detail


class PricingError(PlaceOrderError):
    """A line price or order total is outside its allowed range."""

    code = "PRICING_FAILED"

    def __init__(self, field: str, amount: Any, reason: str) -> None:
        self.field = field
        self.amount = amount
        self.reason = reason
        super().__init__(f"Cannot price {field} ({amount}): {reason}")

    def detail(self) -> dict[str, Any]:
        return {"field": self.field, "amount": str(self.amount), "reason": self.reason}


class RemoteServiceError(PlaceOrderError):
    """A collaborator call failed for reasons unrelated to the order's content."""

    code = "REMOTE_SERVICE_ERROR"

    def __init__(self, service: str, reason: str) -> None:
        self.service = service
        self.reason = reason
        super().__init__(f"{service} failed: {reason}")

    def detail(self) -> dict[str, Any]:
        return {"service": self.service, "reason": self.reason}


# ---------------------------------------------------------------------------
# Address-check outcomes (raised by the address collaborator)
# ---------------------------------------------------------------------------


class AddressValidationError(Exception):
    """Raised by an address-check collaborator for a definite negative answer."""

    reason = "address rejected"


class AddressNotFoundError(AddressValidationError):
    reason = "address not found"


class InvalidAddressFormatError(AddressValidationError):
    reason = "invalid address format"
