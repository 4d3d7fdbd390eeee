"""Role selection screen — the public landing page."""

from fastapi import APIRouter, Depends

from warranty_portal.application.interfaces import SessionStore
from warranty_portal.application.schemas import (
    RoleOption,
    RoleSelectionView,
    RoleSelectRequest,
    ScreenResponse,
)
from warranty_portal.application.services import LoginService
from warranty_portal.domain.entities import Role
from warranty_portal.infrastructure.dependencies import get_login_service, get_session_store
from warranty_portal.presentation.screens import paths

router = APIRouter(tags=["Role Selection"])

_ROLE_OPTIONS = [
    RoleOption(
        role=Role.CUSTOMER,
        title="Customer",
        description="Register warranty, track products, and raise service requests",
        action="Continue as Customer",
    ),
    RoleOption(
        role=Role.DISTRIBUTOR,
        title="Distributor",
        description="Manage customer products, update details, and assist with services",
        action="Continue as Distributor",
    ),
]


@router.get("/", response_model=RoleSelectionView)
async def role_selection(store: SessionStore = Depends(get_session_store)) -> RoleSelectionView:
    """List the roles a user can continue as."""
    return RoleSelectionView(
        roles=_ROLE_OPTIONS,
        selected_role=store.role if store.has_role else None,
    )


@router.post("/", response_model=ScreenResponse)
async def select_role(
    body: RoleSelectRequest,
    service: LoginService = Depends(get_login_service),
) -> ScreenResponse:
    """Remember the chosen role and continue to login."""
    service.select_role(body.role)
    return ScreenResponse(screen="role-selection", navigate_to=paths.LOGIN)
