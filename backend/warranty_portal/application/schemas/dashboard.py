"""View models for the dashboard screen."""

from datetime import date

from pydantic import BaseModel

from warranty_portal.application.schemas.common import ScreenResponse


class QuickAction(BaseModel):
    label: str
    path: str


class ProductSummary(BaseModel):
    """Product card; ``customer_phone`` is only filled in for distributors."""

    id: str
    name: str
    model: str
    serial_number: str
    purchase_date: date
    warranty_expiry: date
    warranty_status: str
    badge: str
    customer_phone: str | None = None
    path: str


class EmptyState(BaseModel):
    title: str
    message: str


class DashboardView(ScreenResponse):
    screen: str = "dashboard"
    title: str
    section_title: str
    query: str = ""
    quick_actions: list[QuickAction]
    products: list[ProductSummary]
    empty_state: EmptyState | None = None
