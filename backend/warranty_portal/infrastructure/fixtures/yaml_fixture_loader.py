"""Fixture loader — parses the YAML fixture file into domain entities.

Executed once per process; the result is cached by the dependency layer.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any

import yaml

from warranty_portal.domain.entities import (
    Product,
    ServiceRecord,
    ServiceStatus,
    UserProfile,
    WarrantyStatus,
)
from warranty_portal.domain.exceptions import FixtureLoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FixtureCatalog:
    """Everything the screens display, loaded from one fixture file."""

    products: list[Product]
    service_history: list[ServiceRecord]
    profile: UserProfile


class YamlFixtureLoader:
    """Builds a FixtureCatalog from ``products``, ``service_history`` and ``profile`` keys."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def load(self) -> FixtureCatalog:
        data = self._load_yaml()
        try:
            products = [self._parse_product(item) for item in data.get("products") or []]
            history = [self._parse_service_record(item) for item in data.get("service_history") or []]
            profile = self._parse_profile(data.get("profile") or {})
        except (KeyError, TypeError, ValueError) as exc:
            raise FixtureLoadError(str(self._path), f"{type(exc).__name__}: {exc}") from exc

        logger.info(
            "Loaded fixtures from %s: %d products, %d service records",
            self._path.name,
            len(products),
            len(history),
        )
        return FixtureCatalog(products=products, service_history=history, profile=profile)

    def _load_yaml(self) -> dict[str, Any]:
        if not self._path.exists():
            raise FixtureLoadError(str(self._path), "file does not exist")
        try:
            data = yaml.safe_load(self._path.read_text("utf-8"))
        except yaml.YAMLError as exc:
            raise FixtureLoadError(str(self._path), f"invalid YAML: {exc}") from exc
        if not isinstance(data, dict):
            raise FixtureLoadError(str(self._path), "top level must be a mapping")
        return data

    @staticmethod
    def _parse_product(item: dict[str, Any]) -> Product:
        return Product(
            id=str(item["id"]),
            name=item["name"],
            model=item["model"],
            purchase_date=_as_date(item["purchase_date"]),
            installation_date=_as_date(item["installation_date"]),
            warranty_status=WarrantyStatus(item["warranty_status"]),
            warranty_expiry=_as_date(item["warranty_expiry"]),
            serial_number=item["serial_number"],
            customer_phone=str(item["customer_phone"]),
            warranty_period=item.get("warranty_period", ""),
            customer_name=item.get("customer_name", ""),
            customer_email=item.get("customer_email", ""),
            invoice_number=item.get("invoice_number", ""),
        )

    @staticmethod
    def _parse_service_record(item: dict[str, Any]) -> ServiceRecord:
        return ServiceRecord(
            id=str(item["id"]),
            product_name=item["product_name"],
            request_date=_as_date(item["request_date"]),
            status=ServiceStatus(item["status"]),
            description=item["description"],
            resolution=item.get("resolution"),
            completed_date=_as_optional_date(item.get("completed_date")),
            scheduled_date=_as_optional_date(item.get("scheduled_date")),
            technician_name=item.get("technician_name"),
        )

    @staticmethod
    def _parse_profile(item: dict[str, Any]) -> UserProfile:
        return UserProfile(
            name=item.get("name", ""),
            email=item.get("email", ""),
            phone="",
            address=item.get("address", ""),
            city=item.get("city", ""),
            state=item.get("state", ""),
            pincode=str(item.get("pincode", "")),
        )


def _as_date(value: Any) -> date:
    """YAML yields ``date`` for bare ISO dates and ``str`` for quoted ones."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))


def _as_optional_date(value: Any) -> date | None:
    return None if value in (None, "") else _as_date(value)
