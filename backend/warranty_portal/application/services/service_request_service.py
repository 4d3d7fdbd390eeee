"""Application service for the Service Request form.

A request is validated and acknowledged; it is never appended to the
service history.
"""

import logging
from dataclasses import dataclass

from warranty_portal.application.interfaces import ProductRepository
from warranty_portal.application.services.photo_preview_service import (
    PhotoPreview,
    PhotoPreviewService,
)
from warranty_portal.domain.entities import Product
from warranty_portal.domain.exceptions import FormValidationError, MissingInformationError
from warranty_portal.infrastructure.logging.navigation_logger import NavigationLogger, NavigationStage

logger = logging.getLogger(__name__)
nlog = NavigationLogger()

SCREEN = "service-request"


@dataclass(frozen=True)
class PhotoUpload:
    content: bytes
    content_type: str | None
    filename: str = ""


@dataclass(frozen=True)
class ServiceRequestSubmission:
    """An accepted (but discarded) service request."""

    product: Product
    issue_description: str
    photo: PhotoPreview | None = None


class ServiceRequestService:
    def __init__(self, repository: ProductRepository, photo_service: PhotoPreviewService):
        self._repository = repository
        self._photo_service = photo_service

    def preview_photo(self, upload: PhotoUpload) -> PhotoPreview:
        return self._photo_service.build_preview(upload.content, upload.content_type, upload.filename)

    async def submit(
        self,
        product_id: str,
        issue_description: str,
        photo: PhotoUpload | None = None,
    ) -> ServiceRequestSubmission:
        product_id = product_id.strip()
        issue_description = issue_description.strip()

        missing: dict[str, str] = {}
        if not product_id:
            missing["product_id"] = "Choose a product"
        if not issue_description:
            missing["issue_description"] = "Describe the issue"
        if missing:
            nlog.rejected(NavigationStage.FORM, "Missing Information", screen=SCREEN, fields=",".join(missing))
            raise MissingInformationError(SCREEN, missing)

        product = await self._repository.get_by_id(product_id)
        if product is None:
            raise FormValidationError(
                SCREEN,
                "Unknown product",
                "Please choose one of the listed products",
                {"product_id": "Choose a product from the list"},
            )

        preview = self.preview_photo(photo) if photo is not None else None

        logger.info(
            "Service request accepted for product %s (%d chars, photo=%s)",
            product.id,
            len(issue_description),
            preview is not None,
        )
        nlog.transition(NavigationStage.FORM, "Service Request Created", product=product.id)
        return ServiceRequestSubmission(
            product=product,
            issue_description=issue_description,
            photo=preview,
        )
