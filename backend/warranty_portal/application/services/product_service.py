"""Application service (use case) for product listing, search and detail."""

import re

from warranty_portal.application.interfaces import ProductRepository
from warranty_portal.domain.entities import Product, Role
from warranty_portal.domain.exceptions import (
    EntityNotFoundError,
    FormValidationError,
    PermissionDeniedError,
)
from warranty_portal.infrastructure.logging.navigation_logger import (
    NavigationLogger,
    NavigationStage,
    mask_mobile,
)

nlog = NavigationLogger()

_PHONE_PATTERN = re.compile(r"[0-9]{10}")


class ProductService:
    """Read-only product queries over the fixture-backed repository."""

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    async def get_product(self, product_id: str) -> Product:
        product = await self._repository.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product", product_id)
        return product

    async def list_products(self, query: str = "") -> list[Product]:
        products = await self._repository.get_all()
        return [p for p in products if p.matches(query)]

    async def update_customer_phone(self, product_id: str, phone: str, role: Role) -> Product:
        """Distributor "Update Phone" action — validated, acknowledged and discarded."""
        if role is not Role.DISTRIBUTOR:
            nlog.rejected(NavigationStage.FORM, "Customer phone update denied", role=role.value)
            raise PermissionDeniedError(role.value, "update customer phone numbers")

        product = await self.get_product(product_id)
        phone = phone.strip()
        if not _PHONE_PATTERN.fullmatch(phone):
            raise FormValidationError(
                "product-detail",
                "Invalid phone number",
                "Please enter a valid 10-digit mobile number",
                {"phone": "Enter a 10-digit mobile number"},
            )
        nlog.transition(
            NavigationStage.FORM,
            "Customer phone update accepted (not persisted)",
            product=product.id,
            phone=mask_mobile(phone),
        )
        return product
