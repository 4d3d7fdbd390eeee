"""Domain entities for the client session and the login flow."""

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    """Who is using the portal."""

    CUSTOMER = "customer"
    DISTRIBUTOR = "distributor"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class LoginStage(str, Enum):
    """Steps of the mocked OTP login."""

    MOBILE_ENTRY = "mobile-entry"
    OTP_SENT = "otp-sent"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True)
class Session:
    """Snapshot of what the session store currently holds."""

    role: Role
    authenticated: bool
    mobile: str
    pending_mobile: str | None = None

    @property
    def login_stage(self) -> LoginStage:
        if self.authenticated:
            return LoginStage.AUTHENTICATED
        if self.pending_mobile:
            return LoginStage.OTP_SENT
        return LoginStage.MOBILE_ENTRY
