"""Domain entity for a past or ongoing service request."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class ServiceStatus(str, Enum):
    """Presentation-only service ticket state, fixed per fixture."""

    COMPLETED = "completed"
    IN_PROGRESS = "in-progress"
    CANCELLED = "cancelled"


_BADGE_VARIANTS = {
    ServiceStatus.COMPLETED: "success",
    ServiceStatus.IN_PROGRESS: "warning",
    ServiceStatus.CANCELLED: "destructive",
}


@dataclass
class ServiceRecord:
    id: str
    product_name: str
    request_date: date
    status: ServiceStatus
    description: str
    resolution: str | None = None
    completed_date: date | None = None
    scheduled_date: date | None = None
    technician_name: str | None = None

    @property
    def badge_variant(self) -> str:
        return _BADGE_VARIANTS.get(self.status, "muted")

    @property
    def badge_label(self) -> str:
        """e.g. ``in-progress`` → ``IN PROGRESS``."""
        return self.status.value.upper().replace("-", " ")
