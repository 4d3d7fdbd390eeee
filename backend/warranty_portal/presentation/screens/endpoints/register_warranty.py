"""Register Warranty screen."""

from datetime import date

from fastapi import Depends

from warranty_portal.application.schemas import (
    Notification,
    ProductOption,
    RegisterWarrantyRequest,
    RegisterWarrantyView,
    ScreenResponse,
)
from warranty_portal.application.services import ProductService, WarrantyRegistrationService
from warranty_portal.config import Settings, get_settings
from warranty_portal.infrastructure.dependencies import (
    get_product_service,
    get_warranty_registration_service,
)
from warranty_portal.presentation.screens import paths
from warranty_portal.presentation.screens.guard import protected_router

router = protected_router(prefix="/register-warranty", tags=["Register Warranty"])

_NOTES = [
    "Warranty period starts from installation date",
    "Keep your invoice and serial number safe",
    "Register within 30 days of purchase for best coverage",
]


@router.get("", response_model=RegisterWarrantyView)
async def register_warranty_form(
    service: ProductService = Depends(get_product_service),
) -> RegisterWarrantyView:
    products = await service.list_products()
    return RegisterWarrantyView(
        products=[ProductOption(id=p.id, name=p.name) for p in products],
        max_installation_date=date.today(),
        notes=_NOTES,
    )


@router.post("", response_model=ScreenResponse)
async def register_warranty(
    body: RegisterWarrantyRequest,
    service: WarrantyRegistrationService = Depends(get_warranty_registration_service),
    settings: Settings = Depends(get_settings),
) -> ScreenResponse:
    """Validate the registration, acknowledge it, then head back to the dashboard."""
    await service.register(body.product_id, body.installation_date)
    return ScreenResponse(
        screen="register-warranty",
        notification=Notification(
            title="Warranty Activated!",
            description="Your warranty has been successfully registered",
        ),
        navigate_to=paths.DASHBOARD,
        navigate_delay_ms=settings.form_redirect_delay_ms,
    )
