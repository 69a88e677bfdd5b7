# app/services/profile_service.py
import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config.settings import settings
from app.models.task import Task
from app.models.user import User
from app.schemas.user import PasswordChange, ProfileUpdate
from app.services.file_storage import FileStorage
from app.services.file_validation import photo_validator
from app.services.task_service import TaskService
from app.utils.errors import Unauthenticated, ValidationError
from app.utils.security import hash_password, verify_password

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("name", "bio", "phone", "department", "position")


class ProfileService:
    """Operations a caller performs on their own user record"""

    def __init__(self, db: Session, storage: Optional[FileStorage] = None):
        self.db = db
        self.storage = storage

    def _save(self, user: User) -> User:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to persist user %s", user.id)
            raise
        self.db.refresh(user)
        return user

    def get_profile(self, caller: User) -> User:
        return caller

    def update_profile(self, caller: User, fields: ProfileUpdate) -> User:
        changes = fields.model_dump(exclude_unset=True)

        if "name" in changes:
            name = (changes["name"] or "").strip()
            if not name:
                raise ValidationError("Name cannot be empty")
            changes["name"] = name

        for key in PROFILE_FIELDS:
            if key in changes:
                setattr(caller, key, changes[key])

        return self._save(caller)

    def change_password(self, caller: User, payload: PasswordChange) -> None:
        if not payload.current_password or not payload.new_password:
            raise ValidationError("Please provide current and new password")

        min_length = settings.AUTH["min_password_length"]
        if len(payload.new_password) < min_length:
            raise ValidationError(f"Password must be at least {min_length} characters")

        if not verify_password(payload.current_password, caller.hashed_password):
            logger.warning("Password change rejected for user %s: wrong current password", caller.id)
            raise Unauthenticated("Current password is incorrect")

        caller.hashed_password = hash_password(payload.new_password)
        self._save(caller)
        logger.info("Password changed for user %s", caller.id)

    def upload_photo(self, caller: User, data: bytes, mime_type: Optional[str]) -> str:
        """Store a new profile photo and drop the previous one"""
        if self.storage is None:
            raise RuntimeError("No file storage configured for photo uploads")

        extension = photo_validator.validate(data, mime_type)

        previous = caller.profile_photo
        reference = self.storage.store(data, extension)
        caller.profile_photo = reference
        try:
            self._save(caller)
        except SQLAlchemyError:
            # The record still points at the old photo; discard the new file
            self.storage.delete(reference)
            raise

        if previous:
            self.storage.delete(previous)

        logger.info("Profile photo for user %s replaced with %s", caller.id, reference)
        return reference

    def list_completed_tasks(self, caller: User) -> List[Task]:
        return TaskService(self.db).list_completed_tasks(caller, limit=50)
