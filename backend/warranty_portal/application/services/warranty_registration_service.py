"""Application service for the Register Warranty form.

A registration is validated and acknowledged; nothing is stored.
"""

import logging
from dataclasses import dataclass
from datetime import date

from warranty_portal.application.interfaces import ProductRepository
from warranty_portal.domain.entities import Product
from warranty_portal.domain.exceptions import FormValidationError, MissingInformationError
from warranty_portal.infrastructure.logging.navigation_logger import NavigationLogger, NavigationStage

logger = logging.getLogger(__name__)
nlog = NavigationLogger()

SCREEN = "register-warranty"


@dataclass(frozen=True)
class WarrantyRegistration:
    """An accepted (but discarded) registration."""

    product: Product
    installation_date: date


class WarrantyRegistrationService:
    def __init__(self, repository: ProductRepository):
        self._repository = repository

    async def register(
        self,
        product_id: str,
        installation_date: str,
        today: date | None = None,
    ) -> WarrantyRegistration:
        product_id = product_id.strip()
        installation_date = installation_date.strip()

        missing: dict[str, str] = {}
        if not product_id:
            missing["product_id"] = "Choose a product"
        if not installation_date:
            missing["installation_date"] = "Enter the installation date"
        if missing:
            nlog.rejected(NavigationStage.FORM, "Missing Information", screen=SCREEN, fields=",".join(missing))
            raise MissingInformationError(SCREEN, missing)

        product = await self._repository.get_by_id(product_id)
        if product is None:
            raise FormValidationError(
                SCREEN,
                "Unknown product",
                "Please choose one of the listed products",
                {"product_id": "Choose a product from the list"},
            )

        try:
            installed_on = date.fromisoformat(installation_date)
        except ValueError:
            raise FormValidationError(
                SCREEN,
                "Invalid date",
                "Installation date must be a valid date (YYYY-MM-DD)",
                {"installation_date": "Use the YYYY-MM-DD format"},
            )

        if installed_on > (today or date.today()):
            raise FormValidationError(
                SCREEN,
                "Invalid date",
                "Installation date cannot be in the future",
                {"installation_date": "Pick today or an earlier date"},
            )

        logger.info("Warranty registration accepted for product %s, installed %s", product.id, installed_on)
        nlog.transition(NavigationStage.FORM, "Warranty Activated", product=product.id)
        return WarrantyRegistration(product=product, installation_date=installed_on)
