"""View models for the Service History screen."""

from datetime import date

from pydantic import BaseModel

from warranty_portal.application.schemas.common import ScreenResponse
from warranty_portal.application.schemas.dashboard import EmptyState


class ServiceRecordView(BaseModel):
    id: str
    product_name: str
    request_date: date
    status: str
    badge: str
    badge_label: str
    description: str
    resolution: str | None = None
    completed_date: date | None = None
    scheduled_date: date | None = None
    technician_name: str | None = None


class ServiceHistoryView(ScreenResponse):
    screen: str = "service-history"
    records: list[ServiceRecordView]
    empty_state: EmptyState | None = None
    empty_action: str | None = None
