"""View models for the Service Request screen."""

from pydantic import BaseModel

from warranty_portal.application.schemas.common import ProductOption, ScreenResponse


class ServiceRequestView(ScreenResponse):
    screen: str = "service-request"
    products: list[ProductOption]
    max_upload_size_mb: int
    next_steps: list[str]


class PhotoPreviewResponse(ScreenResponse):
    screen: str = "service-request"
    filename: str
    content_type: str
    size_bytes: int
    width: int
    height: int
    data_url: str
