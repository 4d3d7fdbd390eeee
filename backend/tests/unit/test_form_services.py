"""Unit tests for the warranty registration and service request forms."""

import io
import struct
import zlib
from datetime import date

import pytest
from PIL import Image

from warranty_portal.application.services import (
    PhotoPreviewService,
    PhotoUpload,
    ServiceRequestService,
    WarrantyRegistrationService,
)
from warranty_portal.domain.entities import Product, WarrantyStatus
from warranty_portal.domain.exceptions import FormValidationError, MissingInformationError
from warranty_portal.infrastructure.fixtures import InMemoryProductRepository

TODAY = date(2024, 6, 1)


def _png_bytes(size=(4, 3)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color=(200, 30, 30)).save(buffer, format="PNG")
    return buffer.getvalue()


def _png_chunk(kind: bytes, data: bytes) -> bytes:
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", zlib.crc32(kind + data))


def _oversized_png_header(width=60000, height=60000) -> bytes:
    """A tiny PNG whose header claims far more pixels than Pillow will open."""
    ihdr = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    return (
        b"\x89PNG\r\n\x1a\n"
        + _png_chunk(b"IHDR", ihdr)
        + _png_chunk(b"IDAT", b"")
        + _png_chunk(b"IEND", b"")
    )


@pytest.fixture
def repository() -> InMemoryProductRepository:
    return InMemoryProductRepository([
        Product(
            id="1",
            name="Smart Refrigerator XR-500",
            model="XR-500-2023",
            purchase_date=date(2024, 1, 15),
            installation_date=date(2024, 1, 20),
            warranty_status=WarrantyStatus.ACTIVE,
            warranty_expiry=date(2026, 1, 15),
            serial_number="REF2024001",
            customer_phone="9876543210",
        ),
    ])


@pytest.fixture
def registration(repository) -> WarrantyRegistrationService:
    return WarrantyRegistrationService(repository)


@pytest.fixture
def service_requests(repository) -> ServiceRequestService:
    return ServiceRequestService(repository, PhotoPreviewService(max_size_bytes=1024 * 1024))


# ── Register warranty ────────────────────────────────────────────────

@pytest.mark.asyncio
@pytest.mark.parametrize("product_id,installation_date,missing", [
    ("", "2024-05-01", {"product_id"}),
    ("1", "", {"installation_date"}),
    ("", "   ", {"product_id", "installation_date"}),
])
async def test_registration_requires_every_field(registration, product_id, installation_date, missing):
    with pytest.raises(MissingInformationError) as exc_info:
        await registration.register(product_id, installation_date, today=TODAY)
    assert exc_info.value.title == "Missing Information"
    assert set(exc_info.value.field_errors) == missing


@pytest.mark.asyncio
async def test_registration_rejects_unknown_product(registration):
    with pytest.raises(FormValidationError) as exc_info:
        await registration.register("42", "2024-05-01", today=TODAY)
    assert "product_id" in exc_info.value.field_errors


@pytest.mark.asyncio
async def test_registration_rejects_future_installation(registration):
    with pytest.raises(FormValidationError) as exc_info:
        await registration.register("1", "2024-06-02", today=TODAY)
    assert "installation_date" in exc_info.value.field_errors


@pytest.mark.asyncio
async def test_registration_rejects_malformed_date(registration):
    with pytest.raises(FormValidationError):
        await registration.register("1", "01/05/2024", today=TODAY)


@pytest.mark.asyncio
async def test_registration_accepts_today(registration):
    result = await registration.register("1", "2024-06-01", today=TODAY)
    assert result.product.id == "1"
    assert result.installation_date == TODAY


# ── Service request ──────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_service_request_requires_description(service_requests):
    with pytest.raises(MissingInformationError) as exc_info:
        await service_requests.submit("1", "  ")
    assert set(exc_info.value.field_errors) == {"issue_description"}


@pytest.mark.asyncio
async def test_service_request_requires_product(service_requests):
    with pytest.raises(MissingInformationError) as exc_info:
        await service_requests.submit("", "Water leakage from bottom")
    assert set(exc_info.value.field_errors) == {"product_id"}


@pytest.mark.asyncio
async def test_service_request_without_photo(service_requests):
    result = await service_requests.submit("1", "  Cooling issue  ")
    assert result.issue_description == "Cooling issue"
    assert result.photo is None


@pytest.mark.asyncio
async def test_service_request_with_photo(service_requests):
    upload = PhotoUpload(content=_png_bytes(), content_type="image/png", filename="leak.png")
    result = await service_requests.submit("1", "Water leakage", upload)
    assert result.photo is not None
    assert (result.photo.width, result.photo.height) == (4, 3)


# ── Photo preview ────────────────────────────────────────────────────

def test_preview_is_a_data_url():
    preview = PhotoPreviewService(max_size_bytes=1024 * 1024).build_preview(
        _png_bytes((10, 20)), "image/png", "photo.png"
    )
    assert preview.data_url.startswith("data:image/png;base64,")
    assert (preview.width, preview.height) == (10, 20)
    assert preview.filename == "photo.png"


def test_preview_rejects_non_image_content_type():
    with pytest.raises(FormValidationError):
        PhotoPreviewService(max_size_bytes=1024).build_preview(b"hello", "text/plain")


def test_preview_rejects_undecodable_image():
    with pytest.raises(FormValidationError) as exc_info:
        PhotoPreviewService(max_size_bytes=1024).build_preview(b"not really a png", "image/png")
    assert "photo" in exc_info.value.field_errors


def test_preview_rejects_oversized_image():
    content = _png_bytes((64, 64))
    with pytest.raises(FormValidationError):
        PhotoPreviewService(max_size_bytes=len(content) - 1).build_preview(content, "image/png")


def test_preview_rejects_image_with_huge_dimensions():
    content = _oversized_png_header()
    with pytest.raises(FormValidationError) as exc_info:
        PhotoPreviewService(max_size_bytes=1024 * 1024).build_preview(content, "image/png", "bomb.png")
    assert exc_info.value.title == "Invalid image"
    assert exc_info.value.field_errors == {"photo": "The image dimensions are too large"}


@pytest.mark.asyncio
async def test_service_request_rejects_photo_with_huge_dimensions(service_requests):
    upload = PhotoUpload(content=_oversized_png_header(), content_type="image/png", filename="bomb.png")
    with pytest.raises(FormValidationError) as exc_info:
        await service_requests.submit("1", "Water leakage", upload)
    assert "photo" in exc_info.value.field_errors
