from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from typing import Any, Dict, List
from jose import JWTError
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession
import json

from app.db.session import get_db
from app import models, schemas, crud, security
from app.core.exceptions import empty_request
from app.models.enums import UserRole
from app.services.notifier import Notifier, ResendNotifier


oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl="/api/auth/login"
)

def get_notifier(request: Request) -> Notifier:
    return ResendNotifier(sio=getattr(request.app.state, "sio", None))

async def get_json_body(request: Request) -> Dict[str, Any]:
    """Decodes the raw JSON body. Empty, undecodable or non-object bodies are rejected up front."""
    raw = await request.body()
    try:
        data = json.loads(raw) if raw else None
    except (ValueError, UnicodeDecodeError):
        data = None
    if not data or not isinstance(data, dict):
        raise empty_request()
    return data

async def get_current_user(
    db: AsyncSession = Depends(get_db), token: str = Depends(oauth2_scheme)
) -> models.User:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = security.decode_access_token(token)
        token_data = schemas.token.TokenPayload(**payload)
        if token_data.user_id is None:
            raise credentials_exception
    except (JWTError, ValidationError):
        raise credentials_exception

    user = await crud.crud_user.get_user_by_id(db, user_id=token_data.user_id)
    if user is None:
        raise credentials_exception
    return user

async def get_current_active_user(
    current_user: models.User = Depends(get_current_user),
) -> models.User:
    if not current_user.is_active:
        raise HTTPException(status_code=400, detail="Inactive user")
    return current_user

def get_current_user_with_roles(required_roles: List[UserRole]):
    async def role_checker(current_user: models.User = Depends(get_current_active_user)):
        if not current_user.role or current_user.role not in required_roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"The user doesn't have the required privileges. Requires one of: {', '.join(role.value for role in required_roles)}",
            )
        return current_user
    return role_checker

require_seller = get_current_user_with_roles([UserRole.SELLER])
require_buyer = get_current_user_with_roles([UserRole.BUYER])
