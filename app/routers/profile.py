# app/routers/profile.py
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.schemas.task import TaskListResponse, TaskOut
from app.schemas.user import (
    MessageResponse,
    PasswordChange,
    PhotoOut,
    PhotoResponse,
    ProfileOut,
    ProfileResponse,
    ProfileUpdate,
)
from app.services.file_storage import FileStorage, get_file_storage
from app.services.file_validation import photo_validator
from app.services.profile_service import ProfileService
from app.utils.auth import get_current_user

router = APIRouter()


@router.get("", response_model=ProfileResponse)
def get_profile(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get current user profile"""
    user = ProfileService(db).get_profile(current_user)
    return {"success": True, "data": ProfileOut.model_validate(user)}


@router.put("", response_model=ProfileResponse)
def update_profile(
    profile_update: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Update name, bio, phone, department and position; email and role are ignored"""
    user = ProfileService(db).update_profile(current_user, profile_update)
    return {"success": True, "data": ProfileOut.model_validate(user)}


@router.post("/photo", response_model=PhotoResponse)
def upload_photo(
    photo: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    storage: FileStorage = Depends(get_file_storage),
    current_user: User = Depends(get_current_user)
):
    """Upload profile photo (multipart field "photo")"""
    data = b""
    mime_type = None
    if photo is not None:
        # Read one byte past the limit so oversized uploads are detectable without buffering them whole
        data = photo.file.read(photo_validator.max_size + 1)
        mime_type = photo.content_type

    reference = ProfileService(db, storage).upload_photo(current_user, data, mime_type)
    return {"success": True, "data": PhotoOut(profile_photo=storage.url_for(reference))}


@router.put("/password", response_model=MessageResponse)
def change_password(
    payload: PasswordChange,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    ProfileService(db).change_password(current_user, payload)
    return {"success": True, "message": "Password updated successfully"}


@router.get("/tasks", response_model=TaskListResponse)
def completed_tasks(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get user's completed tasks history (latest 50)"""
    tasks = [TaskOut.model_validate(task) for task in ProfileService(db).list_completed_tasks(current_user)]
    return {"success": True, "count": len(tasks), "data": tasks}
