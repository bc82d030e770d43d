"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, ordertaking.toml only contains
overrides. An empty file is a valid configuration.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_validator

from ordertaking.domain.errors import ValidationError
from ordertaking.domain.simple_types import Price, create_product_code


class CatalogConfig(BaseModel):
    """[catalog] section — product codes and their unit prices.

    Example::

        [catalog.prices]
        W1234 = "2.50"
        G123 = "12.00"
    """

    model_config = {"frozen": True}

    prices: dict[str, Decimal] = Field(default_factory=dict)

    @field_validator("prices", mode="before")
    @classmethod
    def _validate_prices(cls, raw: Any) -> Any:
        if not isinstance(raw, dict):
            return raw
        validated: dict[str, Decimal] = {}
        for code, price in raw.items():
            key = str(code).upper()
            try:
                create_product_code(key, field=f"catalog.prices.{key}")
                validated[key] = Price.create(price, field=f"catalog.prices.{key}").value
            except ValidationError as exc:
                # pydantic only collects ValueError/AssertionError
                raise ValueError(str(exc)) from exc
        return validated
