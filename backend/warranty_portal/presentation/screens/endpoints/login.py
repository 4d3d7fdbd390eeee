"""Login screen — mocked mobile/OTP flow, plus logout."""

from fastapi import APIRouter, Depends

from warranty_portal.application.interfaces import SessionStore
from warranty_portal.application.schemas import (
    LoginView,
    Notification,
    ScreenResponse,
    SendOtpRequest,
    VerifyOtpRequest,
)
from warranty_portal.application.services import LoginService
from warranty_portal.infrastructure.dependencies import get_login_service, get_session_store
from warranty_portal.presentation.screens import paths
from warranty_portal.presentation.screens.guard import protected_router

router = APIRouter(prefix="/login", tags=["Login"])
logout_router = protected_router(tags=["Login"])


def _login_view(store: SessionStore, mobile: str | None = None, **kwargs) -> LoginView:
    session = store.snapshot()
    return LoginView(
        role=session.role,
        role_label=f"Login as {session.role.label}",
        stage=session.login_stage,
        mobile=mobile or session.pending_mobile or session.mobile or None,
        **kwargs,
    )


@router.get("", response_model=LoginView)
async def login_screen(store: SessionStore = Depends(get_session_store)) -> LoginView:
    return _login_view(store)


@router.post("/send-otp", response_model=LoginView)
async def send_otp(
    body: SendOtpRequest,
    service: LoginService = Depends(get_login_service),
    store: SessionStore = Depends(get_session_store),
) -> LoginView:
    """Accept a 10-digit mobile number and move on to OTP entry."""
    service.send_otp(body.mobile)
    return _login_view(
        store,
        notification=Notification(
            title="OTP Sent",
            description="A 6-digit OTP has been sent to your mobile number",
        ),
    )


@router.post("/verify-otp", response_model=LoginView)
async def verify_otp(
    body: VerifyOtpRequest,
    service: LoginService = Depends(get_login_service),
    store: SessionStore = Depends(get_session_store),
) -> LoginView:
    """Accept any 6-digit OTP and continue to the dashboard."""
    service.verify_otp(body.otp)
    return _login_view(
        store,
        notification=Notification(title="Login Successful", description="Welcome back!"),
        navigate_to=paths.DASHBOARD,
    )


@router.post("/resend-otp", response_model=LoginView)
async def resend_otp(
    service: LoginService = Depends(get_login_service),
    store: SessionStore = Depends(get_session_store),
) -> LoginView:
    """Go back to mobile entry so a new OTP can be requested."""
    typed = service.resend_otp()
    return _login_view(store, mobile=typed)


@logout_router.post("/logout", response_model=ScreenResponse)
async def logout(service: LoginService = Depends(get_login_service)) -> ScreenResponse:
    service.logout()
    return ScreenResponse(screen="role-selection", navigate_to=paths.ROLE_SELECTION)
