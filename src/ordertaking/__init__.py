"""ordertaking — the place-order workflow with validated domain types."""

from ordertaking.domain.errors import (
    PlaceOrderError,
    PricingError,
    RemoteServiceError,
    ValidationError,
)
from ordertaking.domain.events import (
    BillableOrderPlaced,
    OrderAcknowledgmentSent,
    OrderPlaced,
    PlaceOrderEvent,
)
from ordertaking.domain.order import PlaceOrderCommand, SendResult, UnvalidatedOrder
from ordertaking.services.result import WorkflowError, WorkflowResult
from ordertaking.services.workflow import PlaceOrderWorkflow

__version__ = "0.1.0"

__all__ = [
    "BillableOrderPlaced",
    "OrderAcknowledgmentSent",
    "OrderPlaced",
    "PlaceOrderCommand",
    "PlaceOrderError",
    "PlaceOrderEvent",
    "PlaceOrderWorkflow",
    "PricingError",
    "RemoteServiceError",
    "SendResult",
    "UnvalidatedOrder",
    "ValidationError",
    "WorkflowError",
    "WorkflowResult",
]
