"""Service History screen."""

from fastapi import Depends

from warranty_portal.application.schemas import EmptyState, ServiceHistoryView, ServiceRecordView
from warranty_portal.application.services import ServiceHistoryService
from warranty_portal.domain.entities import ServiceRecord
from warranty_portal.infrastructure.dependencies import get_service_history_service
from warranty_portal.presentation.screens import paths
from warranty_portal.presentation.screens.guard import protected_router

router = protected_router(tags=["Service History"])


def _to_view(record: ServiceRecord) -> ServiceRecordView:
    return ServiceRecordView(
        id=record.id,
        product_name=record.product_name,
        request_date=record.request_date,
        status=record.status.value,
        badge=record.badge_variant,
        badge_label=record.badge_label,
        description=record.description,
        resolution=record.resolution,
        completed_date=record.completed_date,
        scheduled_date=record.scheduled_date,
        technician_name=record.technician_name,
    )


@router.get("/service-history", response_model=ServiceHistoryView, response_model_exclude_none=True)
async def service_history(
    service: ServiceHistoryService = Depends(get_service_history_service),
) -> ServiceHistoryView:
    records = await service.list_history()
    if not records:
        return ServiceHistoryView(
            records=[],
            empty_state=EmptyState(
                title="No Service History",
                message="You haven't raised any service requests yet",
            ),
            empty_action=paths.SERVICE_REQUEST,
        )
    return ServiceHistoryView(records=[_to_view(r) for r in records])
