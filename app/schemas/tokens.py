# app/schemas/tokens.py
from app.schemas.base import ResponseModel
from app.schemas.user import ProfileOut


class AuthResponse(ResponseModel):
    success: bool = True
    token: str
    user: ProfileOut
