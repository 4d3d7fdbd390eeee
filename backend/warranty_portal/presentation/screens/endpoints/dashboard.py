"""Dashboard screen — product list with search and quick actions."""

from fastapi import Depends, Query

from warranty_portal.application.interfaces import SessionStore
from warranty_portal.application.schemas import (
    DashboardView,
    EmptyState,
    ProductSummary,
    QuickAction,
)
from warranty_portal.application.services import ProductService
from warranty_portal.domain.entities import Product, Role
from warranty_portal.infrastructure.dependencies import get_product_service, get_session_store
from warranty_portal.presentation.screens import paths
from warranty_portal.presentation.screens.guard import protected_router

router = protected_router(tags=["Dashboard"])

_QUICK_ACTIONS = [
    QuickAction(label="Register Warranty", path=paths.REGISTER_WARRANTY),
    QuickAction(label="Service Request", path=paths.SERVICE_REQUEST),
    QuickAction(label="Service History", path=paths.SERVICE_HISTORY),
    QuickAction(label="Profile", path=paths.PROFILE),
]


def _to_summary(product: Product, role: Role) -> ProductSummary:
    return ProductSummary(
        id=product.id,
        name=product.name,
        model=product.model,
        serial_number=product.serial_number,
        purchase_date=product.purchase_date,
        warranty_expiry=product.warranty_expiry,
        warranty_status=product.warranty_status.value,
        badge=product.badge_variant,
        customer_phone=product.customer_phone if role is Role.DISTRIBUTOR else None,
        path=paths.product_detail(product.id),
    )


@router.get("/dashboard", response_model=DashboardView)
async def dashboard(
    q: str = Query("", description="Search by name, model or serial number"),
    service: ProductService = Depends(get_product_service),
    store: SessionStore = Depends(get_session_store),
) -> DashboardView:
    role = store.role
    products = await service.list_products(q)
    is_customer = role is Role.CUSTOMER
    return DashboardView(
        title="My Products" if is_customer else "Distributor Portal",
        section_title="Your Products" if is_customer else "Products Sold",
        query=q,
        quick_actions=_QUICK_ACTIONS,
        products=[_to_summary(p, role) for p in products],
        empty_state=None if products else EmptyState(
            title="No Products Found",
            message="Try adjusting your search or register a new warranty",
        ),
    )
