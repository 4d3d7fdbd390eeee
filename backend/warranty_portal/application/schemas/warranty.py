"""View models for the Register Warranty screen."""

from datetime import date

from pydantic import BaseModel

from warranty_portal.application.schemas.common import ProductOption, ScreenResponse


class RegisterWarrantyView(ScreenResponse):
    screen: str = "register-warranty"
    products: list[ProductOption]
    max_installation_date: date
    notes: list[str]


class RegisterWarrantyRequest(BaseModel):
    product_id: str = ""
    installation_date: str = ""
