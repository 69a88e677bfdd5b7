# app/utils/auth.py
import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.utils.errors import Unauthenticated
from app.utils.ids import parse_id
from app.utils.security import decode_access_token

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


def get_current_user(token: Optional[str] = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> User:
    """Resolve the bearer token into the calling user"""
    if not token:
        raise Unauthenticated("Not authorized, no token")

    payload = decode_access_token(token)
    if payload is None or payload.get("sub") is None:
        raise Unauthenticated()

    user_id = parse_id(str(payload["sub"]))
    if user_id is None:
        raise Unauthenticated()

    user = db.get(User, user_id)
    if user is None:
        logger.warning("Token presented for unknown user %s", user_id)
        raise Unauthenticated("Not authorized, user no longer exists")

    return user
