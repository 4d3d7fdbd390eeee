"""Abstract repository interface (port) for Product lookup."""

from abc import ABC, abstractmethod

from warranty_portal.domain.entities import Product


class ProductRepository(ABC):
    """Port for product data — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, product_id: str) -> Product | None:
        """Retrieve a single product by its id."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Product]:
        """Retrieve every product in display order."""
        ...
