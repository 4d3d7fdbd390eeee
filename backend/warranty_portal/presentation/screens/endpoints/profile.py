"""Profile screen."""

from fastapi import Depends

from warranty_portal.application.interfaces import SessionStore
from warranty_portal.application.schemas import (
    Notification,
    ProfileFields,
    ProfileUpdateRequest,
    ProfileView,
)
from warranty_portal.application.services import ProfileService, ProfileUpdate
from warranty_portal.config import Settings, get_settings
from warranty_portal.domain.entities import UserProfile
from warranty_portal.infrastructure.dependencies import get_profile_service, get_session_store
from warranty_portal.presentation.screens import paths
from warranty_portal.presentation.screens.guard import protected_router

router = protected_router(prefix="/profile", tags=["Profile"])


def _fields(profile: UserProfile) -> ProfileFields:
    return ProfileFields(
        name=profile.name,
        email=profile.email,
        phone=profile.phone,
        address=profile.address,
        city=profile.city,
        state=profile.state,
        pincode=profile.pincode,
    )


@router.get("", response_model=ProfileView)
async def profile_form(
    service: ProfileService = Depends(get_profile_service),
    store: SessionStore = Depends(get_session_store),
) -> ProfileView:
    return ProfileView(role=store.role, profile=_fields(service.current_profile()))


@router.post("", response_model=ProfileView)
async def update_profile(
    body: ProfileUpdateRequest,
    service: ProfileService = Depends(get_profile_service),
    store: SessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
) -> ProfileView:
    """Validate and acknowledge profile changes; they are not kept."""
    updated = service.update_profile(ProfileUpdate(**body.model_dump()))
    return ProfileView(
        role=store.role,
        profile=_fields(updated),
        notification=Notification(
            title="Profile Updated",
            description="Your profile information has been saved successfully",
        ),
        navigate_to=paths.DASHBOARD,
        navigate_delay_ms=settings.form_redirect_delay_ms,
    )
