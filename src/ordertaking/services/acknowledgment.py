"""Acknowledgment stage — PricedOrder → OrderAcknowledgmentSent | None.

Renders a letter and hands it to the sender. Sending is best effort:
``SendResult.NOT_SENT``, or an exception from the sender, yields ``None``
instead of an error, because the order is already placed by this point.

INVARIANT: Sender failures are warnings, never errors.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ordertaking.domain.events import OrderAcknowledgmentSent
from ordertaking.domain.order import OrderAcknowledgment, PricedOrder, SendResult
from ordertaking.domain.simple_types import HtmlString

logger = logging.getLogger(__name__)

CreateOrderAcknowledgmentLetter = Callable[[PricedOrder], HtmlString]
SendOrderAcknowledgment = Callable[[OrderAcknowledgment], SendResult]


class OrderAcknowledger:
    def __init__(
        self,
        create_letter: CreateOrderAcknowledgmentLetter,
        send_acknowledgment: SendOrderAcknowledgment,
    ) -> None:
        self._create_letter = create_letter
        self._send_acknowledgment = send_acknowledgment

    def __call__(self, order: PricedOrder) -> OrderAcknowledgmentSent | None:
        acknowledgment = OrderAcknowledgment(
            email_address=order.customer_info.email_address,
            letter=self._create_letter(order),
        )

        try:
            outcome = self._send_acknowledgment(acknowledgment)
        except Exception:
            logger.warning(
                "Acknowledgment send failed for order %s", order.order_id, exc_info=True
            )
            return None

        if outcome == SendResult.SENT:
            return OrderAcknowledgmentSent(
                order_id=order.order_id,
                email_address=order.customer_info.email_address,
            )
        logger.warning("Acknowledgment not sent for order %s", order.order_id)
        return None
