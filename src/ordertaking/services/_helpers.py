"""Shared service-layer helper functions."""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager

from ordertaking.domain.errors import PlaceOrderError, RemoteServiceError

logger = logging.getLogger(__name__)


@contextmanager
def remote_call(
    service: str,
    *,
    passthrough: tuple[type[Exception], ...] = (),
) -> Generator[None]:
    """Wrap unexpected collaborator failures in RemoteServiceError.

    Workflow errors raised by the collaborator itself, and any exception
    type listed in *passthrough*, propagate untouched. Anything else means
    the answer is unknown, not that the order is invalid.
    """
    try:
        yield
    except PlaceOrderError:
        raise
    except passthrough:
        raise
    except Exception as exc:
        logger.debug("Collaborator %s failed", service, exc_info=True)
        raise RemoteServiceError(service, f"{type(exc).__name__}: {exc}") from exc


def line_field(order_line_id: str, name: str) -> str:
    """Field path for a value inside one order line.

    Examples:
        >>> line_field("L1", "product_code")
        'lines[L1].product_code'
    """
    return f"lines[{order_line_id}].{name}"
