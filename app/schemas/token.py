from pydantic import BaseModel
from typing import Optional

from app.models.enums import UserRole

class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"

class TokenPayload(BaseModel):
    """Claims carried by an access token. `sub` is the user's email."""
    sub: Optional[str] = None
    user_id: Optional[int] = None
    role: Optional[UserRole] = None
