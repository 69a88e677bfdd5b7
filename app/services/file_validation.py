# app/services/file_validation.py
import logging
from typing import Optional

import magic

from app.config.settings import settings
from app.utils.errors import ValidationError

logger = logging.getLogger(__name__)


class PhotoValidationService:
    """Validation for uploaded profile photos"""

    def __init__(self, max_size: Optional[int] = None):
        self.max_size = max_size or settings.UPLOADS["max_photo_size"]
        self.allowed_types = settings.UPLOADS["allowed_photo_types"]

    def detect_mime_type(self, data: bytes) -> str:
        """MIME type libmagic reads from the leading bytes of the content"""
        return magic.from_buffer(data[:2048], mime=True)

    def validate(self, data: bytes, mime_type: Optional[str]) -> str:
        """
        Validate a photo upload

        Args:
            data: Raw file content
            mime_type: Content type declared by the client

        Returns:
            File extension to store the photo under

        Raises:
            ValidationError: if the photo is missing, too large or not an accepted image
        """
        if not data:
            raise ValidationError("Please upload an image file")

        mime_type = (mime_type or "").split(";")[0].strip().lower()
        if mime_type not in self.allowed_types:
            raise ValidationError("Only image files are allowed!")

        if len(data) > self.max_size:
            raise ValidationError(
                f"File size exceeds maximum allowed size of {self.max_size / (1024 * 1024):.1f}MB"
            )

        actual_mime_type = self.detect_mime_type(data)
        if actual_mime_type != mime_type:
            logger.warning(f"MIME type mismatch: declared '{mime_type}' but actual '{actual_mime_type}'")
            raise ValidationError("Only image files are allowed!")

        return self.allowed_types[mime_type]


photo_validator = PhotoValidationService()
