"""Read-only repositories over the loaded fixture catalog."""

from warranty_portal.application.interfaces import ProductRepository, ServiceRecordRepository
from warranty_portal.domain.entities import Product, ServiceRecord


class InMemoryProductRepository(ProductRepository):
    def __init__(self, products: list[Product]):
        self._products = list(products)
        self._by_id = {p.id: p for p in self._products}

    async def get_by_id(self, product_id: str) -> Product | None:
        return self._by_id.get(product_id)

    async def get_all(self) -> list[Product]:
        return list(self._products)


class InMemoryServiceRecordRepository(ServiceRecordRepository):
    def __init__(self, records: list[ServiceRecord]):
        self._records = list(records)

    async def get_all(self) -> list[ServiceRecord]:
        return list(self._records)
