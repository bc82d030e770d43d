"""AppContext — bootstrap for applications embedding the workflow.

Created once from :class:`OrderTakingSettings`. Configures structured
logging, enables telemetry when verbose, and wires the catalog
collaborators from config into a :class:`PlaceOrderWorkflow`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ordertaking.config.logging import configure_logging
from ordertaking.infrastructure.catalog import StaticCatalog
from ordertaking.services.telemetry import enable_telemetry
from ordertaking.services.workflow import PlaceOrderWorkflow

if TYPE_CHECKING:
    from ordertaking.config.settings import OrderTakingSettings
    from ordertaking.services.acknowledgment import (
        CreateOrderAcknowledgmentLetter,
        SendOrderAcknowledgment,
    )
    from ordertaking.services.validation import CheckAddressExists


class AppContext:
    """Shared application context.

    The catalog is built lazily on first use so an application that only
    needs logging never validates the price list.
    """

    def __init__(self, settings: OrderTakingSettings) -> None:
        self.settings = settings
        self._catalog: StaticCatalog | None = None

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()

    @property
    def catalog(self) -> StaticCatalog:
        """The configured catalog (created lazily on first access)."""
        if self._catalog is None:
            self._catalog = StaticCatalog.from_config(self.settings.catalog)
        return self._catalog

    def build_workflow(
        self,
        *,
        check_address_exists: CheckAddressExists,
        create_letter: CreateOrderAcknowledgmentLetter,
        send_acknowledgment: SendOrderAcknowledgment,
    ) -> PlaceOrderWorkflow:
        """Wire the catalog plus the given remote collaborators."""
        return PlaceOrderWorkflow(
            check_product_code_exists=self.catalog.check_product_code_exists,
            check_address_exists=check_address_exists,
            get_product_price=self.catalog.get_product_price,
            create_letter=create_letter,
            send_acknowledgment=send_acknowledgment,
        )
