"""Abstract repository interface (port) for service history."""

from abc import ABC, abstractmethod

from warranty_portal.domain.entities import ServiceRecord


class ServiceRecordRepository(ABC):
    """Port for service history — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_all(self) -> list[ServiceRecord]:
        """Retrieve every service record in display order."""
        ...
