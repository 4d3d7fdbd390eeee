"""View models for the Profile screen."""

from pydantic import BaseModel

from warranty_portal.application.schemas.common import ScreenResponse
from warranty_portal.domain.entities import Role


class ProfileFields(BaseModel):
    name: str
    email: str
    phone: str
    address: str
    city: str
    state: str
    pincode: str


class ProfileView(ScreenResponse):
    screen: str = "profile"
    role: Role
    profile: ProfileFields
    phone_editable: bool = False


class ProfileUpdateRequest(BaseModel):
    """Phone is not accepted here; it always comes from the session."""

    name: str = ""
    email: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    pincode: str = ""
