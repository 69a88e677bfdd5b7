# app/routers/user.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.schemas.user import UserBasic, UserListResponse
from app.utils.auth import get_current_user

router = APIRouter()


@router.get("", response_model=UserListResponse)
def get_all_users(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get all users (for task assignment)"""
    users = [UserBasic.model_validate(user) for user in db.query(User).order_by(User.name, User.id).all()]
    return {"success": True, "count": len(users), "data": users}
