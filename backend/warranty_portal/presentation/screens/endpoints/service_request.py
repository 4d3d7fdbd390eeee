"""Service Request screen, with the in-memory photo preview."""

from fastapi import Depends, File, Form, UploadFile

from warranty_portal.application.schemas import (
    Notification,
    PhotoPreviewResponse,
    ProductOption,
    ScreenResponse,
    ServiceRequestView,
)
from warranty_portal.application.services import (
    PhotoUpload,
    ProductService,
    ServiceRequestService,
)
from warranty_portal.config import Settings, get_settings
from warranty_portal.domain.exceptions import MissingInformationError
from warranty_portal.infrastructure.dependencies import (
    get_product_service,
    get_service_request_service,
)
from warranty_portal.presentation.screens import paths
from warranty_portal.presentation.screens.guard import protected_router

router = protected_router(prefix="/service-request", tags=["Service Request"])

_NEXT_STEPS = [
    "We'll review your request within 24 hours",
    "Our service team will contact you to schedule a visit",
    "Track your request status in Service History",
]


async def _read_upload(photo: UploadFile | None) -> PhotoUpload | None:
    if photo is None or not photo.filename:
        return None
    content = await photo.read()
    return PhotoUpload(content=content, content_type=photo.content_type, filename=photo.filename)


@router.get("", response_model=ServiceRequestView)
async def service_request_form(
    service: ProductService = Depends(get_product_service),
    settings: Settings = Depends(get_settings),
) -> ServiceRequestView:
    products = await service.list_products()
    return ServiceRequestView(
        products=[ProductOption(id=p.id, name=p.name) for p in products],
        max_upload_size_mb=settings.max_upload_size_mb,
        next_steps=_NEXT_STEPS,
    )


@router.post("/photo", response_model=PhotoPreviewResponse)
async def preview_photo(
    photo: UploadFile | None = File(None),
    service: ServiceRequestService = Depends(get_service_request_service),
) -> PhotoPreviewResponse:
    """Read an image into memory and hand it back as a preview."""
    upload = await _read_upload(photo)
    if upload is None:
        raise MissingInformationError("service-request", {"photo": "Choose an image to upload"})
    preview = service.preview_photo(upload)
    return PhotoPreviewResponse(
        notification=Notification(title="Image uploaded", description="Image uploaded successfully"),
        filename=preview.filename,
        content_type=preview.content_type,
        size_bytes=preview.size_bytes,
        width=preview.width,
        height=preview.height,
        data_url=preview.data_url,
    )


@router.post("", response_model=ScreenResponse)
async def submit_service_request(
    product_id: str = Form(""),
    issue_description: str = Form(""),
    photo: UploadFile | None = File(None),
    service: ServiceRequestService = Depends(get_service_request_service),
    settings: Settings = Depends(get_settings),
) -> ScreenResponse:
    """Validate the request, acknowledge it, then head to the service history."""
    upload = await _read_upload(photo)
    await service.submit(product_id, issue_description, upload)
    return ScreenResponse(
        screen="service-request",
        notification=Notification(
            title="Service Request Created",
            description="Your request has been submitted. We'll contact you soon.",
        ),
        navigate_to=paths.SERVICE_HISTORY,
        navigate_delay_ms=settings.form_redirect_delay_ms,
    )
