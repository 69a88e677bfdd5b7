# app/services/file_storage.py
import logging
import uuid
from abc import ABC, abstractmethod
from pathlib import Path, PurePosixPath
from typing import Optional

from app.config.settings import settings

logger = logging.getLogger(__name__)


class FileStorage(ABC):
    """Storage capability used for profile photos.

    Records only ever hold the reference returned by ``store``; where the
    bytes live is up to the implementation.
    """

    @abstractmethod
    def store(self, data: bytes, extension: str = "") -> str:
        """Persist the bytes and return a reference to them"""

    @abstractmethod
    def delete(self, reference: str) -> bool:
        """Remove the file behind a reference; False when nothing was removed"""

    @abstractmethod
    def url_for(self, reference: str) -> str:
        """Public URL clients load the file from"""


class LocalFileStorage(FileStorage):
    """Stores files on local disk under ``upload_dir``"""

    def __init__(self, upload_dir: str = "uploads", folder: str = "profiles"):
        self.upload_dir = Path(upload_dir)
        self.folder = folder

    def generate_unique_filename(self, extension: str) -> str:
        """
        Generate a unique filename to prevent conflicts

        Args:
            extension: File extension including the leading dot

        Returns:
            Filename made of a UUID and the extension
        """
        return f"{uuid.uuid4()}{extension}"

    def _resolve(self, reference: str) -> Optional[Path]:
        # References are relative POSIX paths inside upload_dir
        relative = PurePosixPath(reference)
        if relative.is_absolute() or ".." in relative.parts:
            return None
        return self.upload_dir.joinpath(*relative.parts)

    def store(self, data: bytes, extension: str = "") -> str:
        """
        Save bytes to disk

        Args:
            data: File content
            extension: File extension including the leading dot

        Returns:
            Reference of the stored file, relative to the upload directory
        """
        target_dir = self.upload_dir / self.folder
        target_dir.mkdir(parents=True, exist_ok=True)

        filename = self.generate_unique_filename(extension)
        (target_dir / filename).write_bytes(data)

        reference = f"{self.folder}/{filename}"
        logger.info(f"File saved successfully: {reference}")
        return reference

    def delete(self, reference: str) -> bool:
        """
        Delete a stored file

        Args:
            reference: Reference returned by store()

        Returns:
            True if file was deleted successfully, False otherwise
        """
        path = self._resolve(reference)
        if path is None:
            logger.warning(f"Refusing to delete file outside upload directory: {reference}")
            return False

        try:
            if path.exists():
                path.unlink()
                logger.info(f"File deleted successfully: {reference}")
                return True
            logger.warning(f"File not found for deletion: {reference}")
            return False
        except OSError as e:
            logger.error(f"Error deleting file {reference}: {str(e)}")
            return False

    def exists(self, reference: str) -> bool:
        path = self._resolve(reference)
        return path is not None and path.is_file()

    def url_for(self, reference: str) -> str:
        return f"/uploads/{reference}"


# Global instance
file_storage = LocalFileStorage(settings.UPLOADS["upload_dir"])


def get_file_storage() -> FileStorage:
    return file_storage


def photo_url(reference: Optional[str]) -> Optional[str]:
    """URL of a stored profile photo, None when the user has none"""
    return file_storage.url_for(reference) if reference else None
