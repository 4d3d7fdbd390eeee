"""View models for the product detail screen."""

from datetime import date

from pydantic import BaseModel

from warranty_portal.application.schemas.common import ScreenResponse


class WarrantyDetails(BaseModel):
    status: str
    badge: str
    purchase_date: date
    installation_date: date
    period: str
    expiry: date


class CustomerDetails(BaseModel):
    name: str
    phone: str


class ProductAction(BaseModel):
    label: str
    path: str


class ProductDetailView(ScreenResponse):
    screen: str = "product-detail"
    id: str
    name: str
    model: str
    serial_number: str
    invoice_number: str
    warranty: WarrantyDetails
    customer: CustomerDetails | None = None
    actions: list[ProductAction]
    back: str = "/dashboard"


class CustomerPhoneUpdateRequest(BaseModel):
    phone: str = ""
