"""PlaceOrderWorkflow — the place-order pipeline.

Pipeline: VALIDATE → PRICE → ACKNOWLEDGE → CREATE EVENTS
(DESIGN.md Section 4)

The workflow is built once from its five collaborators and holds no other
state; each call is independent. Two entry points:

- ``place_order()`` returns the event list and raises PlaceOrderError
  unmodified on validation, pricing, or remote-service failure.
- ``run()`` is the railway form: it always returns a WorkflowResult.
"""

from __future__ import annotations

import logging

import structlog

from ordertaking.domain.errors import PlaceOrderError
from ordertaking.domain.events import OrderAcknowledgmentSent, PlaceOrderEvent
from ordertaking.domain.order import PlaceOrderCommand, UnvalidatedOrder
from ordertaking.services.acknowledgment import (
    CreateOrderAcknowledgmentLetter,
    OrderAcknowledger,
    SendOrderAcknowledgment,
)
from ordertaking.services.events import create_events
from ordertaking.services.pricing import GetProductPrice, OrderPricer
from ordertaking.services.result import WorkflowError, WorkflowResult
from ordertaking.services.telemetry import trace_span, traced
from ordertaking.services.validation import (
    CheckAddressExists,
    CheckProductCodeExists,
    OrderValidator,
)

logger = logging.getLogger(__name__)


class PlaceOrderWorkflow:
    """Validates, prices, and acknowledges an order, then emits its events."""

    def __init__(
        self,
        *,
        check_product_code_exists: CheckProductCodeExists,
        check_address_exists: CheckAddressExists,
        get_product_price: GetProductPrice,
        create_letter: CreateOrderAcknowledgmentLetter,
        send_acknowledgment: SendOrderAcknowledgment,
    ) -> None:
        self._validate = OrderValidator(check_product_code_exists, check_address_exists)
        self._price = OrderPricer(get_product_price)
        self._acknowledge = OrderAcknowledger(create_letter, send_acknowledgment)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def place_order(self, order: UnvalidatedOrder) -> list[PlaceOrderEvent]:
        """Run every stage in sequence; the first failure stops the run."""
        with structlog.contextvars.bound_contextvars(order_id=order.order_id):
            # ── VALIDATE ──────────────────────────────────────────────
            with trace_span("validate") as span:
                validated = self._validate(order)
                if span:
                    span.annotate("lines", len(validated.lines))

            # ── PRICE ─────────────────────────────────────────────────
            with trace_span("price") as span:
                priced = self._price(validated)
                if span:
                    span.annotate("amount_to_bill", str(priced.amount_to_bill))

            # ── ACKNOWLEDGE ───────────────────────────────────────────
            with trace_span("acknowledge") as span:
                acknowledgment = self._acknowledge(priced)
                if span:
                    span.annotate("sent", acknowledgment is not None)

            # ── CREATE EVENTS ─────────────────────────────────────────
            with trace_span("create_events"):
                events = create_events(priced, acknowledgment)

            logger.info(
                "Placed order %s: %d events, %s to bill",
                priced.order_id,
                len(events),
                priced.amount_to_bill,
            )
            return events

    @traced
    def run(self, order: UnvalidatedOrder) -> WorkflowResult:
        """Place *order* and report the outcome as a WorkflowResult."""
        op = "place_order"
        try:
            events = self.place_order(order)
        except PlaceOrderError as exc:
            logger.info("Order %r rejected: %s", order.order_id, exc)
            return WorkflowResult(ok=False, op=op, error=WorkflowError.from_exception(exc))

        warnings: list[str] = []
        if not any(isinstance(event, OrderAcknowledgmentSent) for event in events):
            warnings.append(f"Acknowledgment for order {order.order_id} was not sent")
        return WorkflowResult(ok=True, op=op, events=events, warnings=warnings)

    def run_command(self, command: PlaceOrderCommand) -> WorkflowResult:
        """Run the order carried by *command*, logging who issued it."""
        logger.info(
            "PlaceOrder command from %s at %s",
            command.user_id,
            command.timestamp.isoformat(),
        )
        return self.run(command.data)
