"""Application service (use case) for the service history screen."""

from warranty_portal.application.interfaces import ServiceRecordRepository
from warranty_portal.domain.entities import ServiceRecord


class ServiceHistoryService:
    def __init__(self, repository: ServiceRecordRepository):
        self._repository = repository

    async def list_history(self) -> list[ServiceRecord]:
        return await self._repository.get_all()
