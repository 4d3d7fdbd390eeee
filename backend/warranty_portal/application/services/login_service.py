"""Application service for role selection and the mocked OTP login.

The flow is MobileEntry → OTPSent → Authenticated. No OTP is generated or
checked: any six digits are accepted once an OTP has been "sent".
"""

import logging
import re

from warranty_portal.application.interfaces import SessionStore
from warranty_portal.domain.entities import LoginStage, Role
from warranty_portal.domain.exceptions import FormValidationError, LoginStepError
from warranty_portal.infrastructure.logging.navigation_logger import (
    NavigationLogger,
    NavigationStage,
    mask_mobile,
)

logger = logging.getLogger(__name__)
nlog = NavigationLogger()

MOBILE_PATTERN = re.compile(r"[0-9]{10}")
OTP_PATTERN = re.compile(r"[0-9]{6}")

SCREEN = "login"


class LoginService:
    """Drives the login state machine over a SessionStore."""

    def __init__(self, store: SessionStore):
        self._store = store

    @property
    def stage(self) -> LoginStage:
        return self._store.snapshot().login_stage

    def select_role(self, role: Role) -> None:
        self._store.set_role(role)
        nlog.transition(NavigationStage.ROLE, "Role selected", role=role.value)

    def send_otp(self, mobile: str) -> str:
        """Accept a 10-digit mobile number and move to OTP entry."""
        mobile = mobile.strip()
        if not MOBILE_PATTERN.fullmatch(mobile):
            nlog.rejected(NavigationStage.LOGIN, "Invalid mobile number", length=len(mobile))
            raise FormValidationError(
                SCREEN,
                "Invalid mobile number",
                "Please enter a valid 10-digit mobile number",
                {"mobile": "Enter a 10-digit mobile number"},
            )
        self._store.set_pending_mobile(mobile)
        # No OTP is dispatched anywhere.
        nlog.transition(NavigationStage.LOGIN, "OTP sent", mobile=mask_mobile(mobile))
        return mobile

    def verify_otp(self, otp: str) -> str:
        """Accept any 6-digit OTP for the pending mobile and authenticate the session."""
        pending = self._store.pending_mobile
        if not pending:
            nlog.rejected(NavigationStage.LOGIN, "OTP verification before OTP was sent")
            raise LoginStepError(self.stage.value, "Request an OTP before verifying")

        otp = otp.strip()
        if not OTP_PATTERN.fullmatch(otp):
            nlog.rejected(NavigationStage.LOGIN, "Invalid OTP", length=len(otp))
            raise FormValidationError(
                SCREEN,
                "Invalid OTP",
                "Please enter a valid 6-digit OTP",
                {"otp": "Enter the 6-digit OTP"},
            )

        self._store.set_authenticated(True)
        self._store.set_mobile(pending)
        self._store.set_pending_mobile(None)
        logger.info("Session authenticated for %s as %s", mask_mobile(pending), self._store.role.value)
        nlog.transition(NavigationStage.LOGIN, "Login successful", mobile=mask_mobile(pending))
        return pending

    def resend_otp(self) -> str | None:
        """Drop back to mobile entry, keeping the mobile that was typed."""
        pending = self._store.pending_mobile
        self._store.set_pending_mobile(None)
        nlog.transition(NavigationStage.LOGIN, "Back to mobile entry", mobile=mask_mobile(pending))
        return pending

    def logout(self) -> None:
        mobile = self._store.mobile
        self._store.clear()
        logger.info("Session cleared for %s", mask_mobile(mobile))
        nlog.transition(NavigationStage.NAVIGATE, "Logged out")
