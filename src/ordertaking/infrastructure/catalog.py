"""StaticCatalog — in-memory product catalog collaborator.

Supplies both catalog collaborators of the workflow from a fixed price
list: ``check_product_code_exists`` and ``get_product_price``. Intended
for tests, demos, and deployments whose catalog lives in config.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Self

from ordertaking.config.models import CatalogConfig
from ordertaking.domain.errors import PricingError
from ordertaking.domain.simple_types import Price, ProductCode


class StaticCatalog:
    """Product catalog backed by a ``{code: price}`` mapping."""

    def __init__(self, prices: Mapping[str, Price]) -> None:
        self._prices = dict(prices)

    @classmethod
    def from_config(cls, config: CatalogConfig) -> Self:
        return cls.from_amounts(config.prices)

    @classmethod
    def from_amounts(cls, amounts: Mapping[str, Decimal | int | float | str]) -> Self:
        """Build from raw amounts, validating each as a Price."""
        return cls(
            {code: Price.create(amount, field=f"price[{code}]") for code, amount in amounts.items()}
        )

    def __len__(self) -> int:
        return len(self._prices)

    def __contains__(self, code: object) -> bool:
        return str(code) in self._prices

    def check_product_code_exists(self, product_code: ProductCode) -> bool:
        return str(product_code) in self._prices

    def get_product_price(self, product_code: ProductCode) -> Price:
        """Listed unit price for *product_code*.

        Raises:
            PricingError: If the code has no listed price.
        """
        try:
            return self._prices[str(product_code)]
        except KeyError:
            raise PricingError(
                "product_code", str(product_code), "no price listed in catalog"
            ) from None
