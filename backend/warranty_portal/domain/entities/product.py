"""Domain entity for a product under warranty."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class WarrantyStatus(str, Enum):
    """Presentation-only warranty state, fixed per fixture."""

    ACTIVE = "active"
    EXPIRING = "expiring"
    EXPIRED = "expired"


_BADGE_VARIANTS = {
    WarrantyStatus.ACTIVE: "success",
    WarrantyStatus.EXPIRING: "warning",
    WarrantyStatus.EXPIRED: "destructive",
}


@dataclass
class Product:
    """A product sold to a customer, as shown on the dashboard and detail screens."""

    id: str
    name: str
    model: str
    purchase_date: date
    installation_date: date
    warranty_status: WarrantyStatus
    warranty_expiry: date
    serial_number: str
    customer_phone: str
    warranty_period: str = ""
    customer_name: str = ""
    customer_email: str = ""
    invoice_number: str = ""

    @property
    def badge_variant(self) -> str:
        return _BADGE_VARIANTS.get(self.warranty_status, "muted")

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match over name, model and serial number."""
        needle = query.strip().lower()
        if not needle:
            return True
        return (
            needle in self.name.lower()
            or needle in self.model.lower()
            or needle in self.serial_number.lower()
        )
