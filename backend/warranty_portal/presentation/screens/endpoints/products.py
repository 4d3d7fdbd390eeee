"""Product detail screen, with the distributor-only phone update."""

from fastapi import Depends, HTTPException, status

from warranty_portal.application.interfaces import SessionStore
from warranty_portal.application.schemas import (
    CustomerDetails,
    CustomerPhoneUpdateRequest,
    Notification,
    ProductAction,
    ProductDetailView,
    ScreenResponse,
    WarrantyDetails,
)
from warranty_portal.application.services import ProductService
from warranty_portal.domain.entities import Product, Role
from warranty_portal.domain.exceptions import EntityNotFoundError
from warranty_portal.infrastructure.dependencies import get_product_service, get_session_store
from warranty_portal.presentation.screens import paths
from warranty_portal.presentation.screens.guard import protected_router

router = protected_router(prefix="/product", tags=["Products"])


def _to_detail(product: Product, role: Role) -> ProductDetailView:
    customer = None
    if role is Role.DISTRIBUTOR:
        customer = CustomerDetails(name=product.customer_name, phone=product.customer_phone)

    return ProductDetailView(
        id=product.id,
        name=product.name,
        model=product.model,
        serial_number=product.serial_number,
        invoice_number=product.invoice_number,
        warranty=WarrantyDetails(
            status=product.warranty_status.value,
            badge=product.badge_variant,
            purchase_date=product.purchase_date,
            installation_date=product.installation_date,
            period=product.warranty_period,
            expiry=product.warranty_expiry,
        ),
        customer=customer,
        actions=[
            ProductAction(label="Raise Service Request", path=paths.SERVICE_REQUEST),
            ProductAction(label="View Service History", path=paths.SERVICE_HISTORY),
        ],
    )


@router.get("/{product_id}", response_model=ProductDetailView)
async def product_detail(
    product_id: str,
    service: ProductService = Depends(get_product_service),
    store: SessionStore = Depends(get_session_store),
) -> ProductDetailView:
    try:
        product = await service.get_product(product_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_detail(product, store.role)


@router.post("/{product_id}/customer-phone", response_model=ScreenResponse)
async def update_customer_phone(
    product_id: str,
    body: CustomerPhoneUpdateRequest,
    service: ProductService = Depends(get_product_service),
    store: SessionStore = Depends(get_session_store),
) -> ScreenResponse:
    """Distributor-only: acknowledge a new customer phone number (not stored)."""
    try:
        await service.update_customer_phone(product_id, body.phone, store.role)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ScreenResponse(
        screen="product-detail",
        notification=Notification(
            title="Phone Updated",
            description="Customer phone number has been updated",
        ),
    )
