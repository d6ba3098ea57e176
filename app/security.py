from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING
import logging

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.core.config import settings

if TYPE_CHECKING:
    from app.models.user import User

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode = {**data, "exp": expire, "iat": now}
    return jwt.encode(to_encode, settings.SECRET_KEY.get_secret_value(), algorithm=settings.ALGORITHM)

def create_user_token(user: "User", expires_delta: timedelta | None = None) -> str:
    """Access token for a seller, buyer or admin. The role claim drives route access on the client."""
    claims = {"sub": user.email, "user_id": user.id, "role": user.role.value if user.role else None}
    return create_access_token(claims, expires_delta=expires_delta)

def decode_access_token(token: str) -> dict:
    """Decodes the access token and returns the payload."""
    try:
        return jwt.decode(
            token, settings.SECRET_KEY.get_secret_value(), algorithms=[settings.ALGORITHM]
        )
    except JWTError as e:
        logger.warning(f"JWTError during token decoding: {e}")
        raise
