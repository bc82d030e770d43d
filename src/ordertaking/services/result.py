"""WorkflowResult and WorkflowError — the railway return type.

INVARIANT: ``PlaceOrderWorkflow.run`` always returns a WorkflowResult.
Exactly one of ``events`` (non-empty) or ``error`` is meaningful,
selected by ``ok``. (DESIGN.md Section 5)
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, Field

from ordertaking.domain.errors import PlaceOrderError
from ordertaking.domain.events import PlaceOrderEvent


class WorkflowError(BaseModel):
    """Structured error payload within a WorkflowResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: PlaceOrderError) -> Self:
        return cls(code=exc.code, message=str(exc), detail=exc.detail())


class WorkflowResult(BaseModel):
    """Outcome of one place-order run.

    Attributes:
        ok: Whether the order was placed.
        op: Name of the operation (``"place_order"``).
        events: Domain events produced on success.
        warnings: Non-fatal issues (e.g. acknowledgment not sent).
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry spans, counts, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    events: list[PlaceOrderEvent] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    error: WorkflowError | None = None
    meta: dict[str, Any] | None = None
