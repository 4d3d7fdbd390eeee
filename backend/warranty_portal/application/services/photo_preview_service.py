"""Application service that turns an uploaded photo into an in-memory preview.

The image is read, checked with Pillow and returned as a ``data:`` URL.
Nothing is written anywhere.
"""

import base64
import io
import logging
from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError

from warranty_portal.domain.exceptions import FormValidationError

logger = logging.getLogger(__name__)

SCREEN = "service-request"


@dataclass(frozen=True)
class PhotoPreview:
    filename: str
    content_type: str
    size_bytes: int
    width: int
    height: int
    data_url: str


class PhotoPreviewService:
    """Validates uploaded images and renders them as data URLs."""

    def __init__(self, max_size_bytes: int):
        self._max_size_bytes = max_size_bytes

    def build_preview(self, content: bytes, content_type: str | None, filename: str = "") -> PhotoPreview:
        content_type = (content_type or "").lower()
        if not content_type.startswith("image/"):
            raise self._invalid("Only image files can be uploaded")
        if not content:
            raise self._invalid("The uploaded image is empty")
        if len(content) > self._max_size_bytes:
            limit_mb = self._max_size_bytes // (1024 * 1024)
            raise self._invalid(f"Images must be {limit_mb}MB or smaller")

        try:
            with Image.open(io.BytesIO(content)) as image:
                image.verify()
            # verify() leaves the image unusable; reopen for dimensions
            with Image.open(io.BytesIO(content)) as image:
                width, height = image.size
        except Image.DecompressionBombError as exc:
            logger.info("Rejected upload %r: %s", filename, exc)
            raise self._invalid("The image dimensions are too large")
        except (UnidentifiedImageError, OSError, SyntaxError) as exc:
            logger.info("Rejected upload %r: %s", filename, exc)
            raise self._invalid("The uploaded file is not a readable image")

        encoded = base64.b64encode(content).decode("ascii")
        return PhotoPreview(
            filename=filename,
            content_type=content_type,
            size_bytes=len(content),
            width=width,
            height=height,
            data_url=f"data:{content_type};base64,{encoded}",
        )

    @staticmethod
    def _invalid(description: str) -> FormValidationError:
        return FormValidationError(SCREEN, "Invalid image", description, {"photo": description})
