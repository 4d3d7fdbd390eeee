"""View models for the login screen."""

from pydantic import BaseModel

from warranty_portal.application.schemas.common import ScreenResponse
from warranty_portal.domain.entities import LoginStage, Role


class LoginView(ScreenResponse):
    screen: str = "login"
    heading: str = "Welcome Back"
    role: Role
    role_label: str
    stage: LoginStage
    mobile: str | None = None


class SendOtpRequest(BaseModel):
    mobile: str = ""


class VerifyOtpRequest(BaseModel):
    otp: str = ""
