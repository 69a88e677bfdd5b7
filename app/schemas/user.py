from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, EmailStr, Field

from app.models.user import UserRole
from app.schemas.base import RequestModel, ResponseModel


class UserCreate(RequestModel):
    name: str
    email: EmailStr
    password: str


class UserLogin(RequestModel):
    email: EmailStr
    password: str


# Records hold a storage reference; clients receive the URL it is served at
def photo_url_field():
    return Field(
        default=None,
        validation_alias=AliasChoices("profile_photo_url", "profilePhoto"),
        serialization_alias="profilePhoto",
    )


class UserSummary(ResponseModel):
    """Owner/assignee data embedded in task payloads"""
    id: int
    name: str
    email: str
    profile_photo: Optional[str] = photo_url_field()


class UserBasic(UserSummary):
    role: UserRole
    department: Optional[str] = None
    position: Optional[str] = None


class ProfileOut(ResponseModel):
    id: int
    name: str
    email: str
    role: UserRole
    profile_photo: Optional[str] = photo_url_field()
    bio: Optional[str] = None
    phone: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    created_at: datetime


class ProfileUpdate(RequestModel):
    # email and role are deliberately absent: they cannot change through the profile
    name: Optional[str] = None
    bio: Optional[str] = None
    phone: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None


class PasswordChange(RequestModel):
    current_password: Optional[str] = None
    new_password: Optional[str] = None


class PhotoOut(ResponseModel):
    profile_photo: str


class ProfileResponse(ResponseModel):
    success: bool = True
    data: ProfileOut


class PhotoResponse(ResponseModel):
    success: bool = True
    data: PhotoOut


class UserListResponse(ResponseModel):
    success: bool = True
    count: int
    data: List[UserBasic]


class MessageResponse(ResponseModel):
    success: bool = True
    message: str
