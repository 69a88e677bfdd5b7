import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.config.settings import settings
from app.database import get_db
from app.models.user import User, UserRole
from app.schemas.tokens import AuthResponse
from app.schemas.user import ProfileOut, ProfileResponse, UserCreate, UserLogin
from app.utils.auth import get_current_user
from app.utils.errors import Unauthenticated, ValidationError
from app.utils.security import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)

router = APIRouter()


def _auth_payload(user: User) -> dict:
    token = create_access_token(data={"sub": str(user.id)})
    return {
        "success": True,
        "token": token,
        "user": ProfileOut.model_validate(user),
    }


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(user: UserCreate, db: Session = Depends(get_db)):
    name = user.name.strip()
    email = user.email.strip().lower()
    if not name:
        raise ValidationError("Please provide a name")

    min_length = settings.AUTH["min_password_length"]
    if len(user.password) < min_length:
        raise ValidationError(f"Password must be at least {min_length} characters")

    existing_user = db.query(User).filter(User.email == email).first()
    if existing_user:
        raise ValidationError("User already exists")

    new_user = User(
        name=name,
        email=email,
        hashed_password=hash_password(user.password),
        role=UserRole.MEMBER.value,
    )
    db.add(new_user)
    db.commit()
    db.refresh(new_user)

    logger.info("Registered user %s <%s>", new_user.id, new_user.email)
    return _auth_payload(new_user)


@router.post("/login", response_model=AuthResponse)
def login(user: UserLogin, db: Session = Depends(get_db)):
    email = user.email.strip().lower()
    db_user = db.query(User).filter(User.email == email).first()
    if not db_user or not verify_password(user.password, db_user.hashed_password):
        logger.warning("Failed login attempt for %s", email)
        raise Unauthenticated("Invalid credentials")

    return _auth_payload(db_user)


@router.get("/me", response_model=ProfileResponse)
def me(current_user: User = Depends(get_current_user)):
    return {"success": True, "data": ProfileOut.model_validate(current_user)}
