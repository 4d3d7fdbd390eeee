"""View models for the role selection screen."""

from pydantic import BaseModel

from warranty_portal.application.schemas.common import ScreenResponse
from warranty_portal.domain.entities import Role


class RoleOption(BaseModel):
    role: Role
    title: str
    description: str
    action: str


class RoleSelectionView(ScreenResponse):
    screen: str = "role-selection"
    heading: str = "Warranty Management"
    subheading: str = "Select your role to continue"
    roles: list[RoleOption]
    selected_role: Role | None = None


class RoleSelectRequest(BaseModel):
    role: Role
