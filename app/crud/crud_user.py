from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from typing import Optional
import logging

from app.models.user import User
from app.models.enums import UserRole, UserActivityStatus
from app.security import get_password_hash

logger = logging.getLogger(__name__)

async def get_user_by_id(db: AsyncSession, *, user_id: int) -> Optional[User]:
    result = await db.execute(select(User).filter(User.id == user_id))
    return result.scalar_one_or_none()

async def get_user_by_email(db: AsyncSession, *, email: str) -> Optional[User]:
    result = await db.execute(select(User).filter(User.email == email))
    return result.scalar_one_or_none()

async def create_user(
    db: AsyncSession,
    *,
    email: str,
    password: str,
    role: UserRole,
    full_name: Optional[str] = None,
    phone: Optional[str] = None,
) -> User:
    db_user = User(
        email=email,
        hashed_password=get_password_hash(password),
        full_name=full_name,
        phone=phone,
        role=role,
        activity_status=UserActivityStatus.NEW,
        is_active=True,
    )
    db.add(db_user)
    await db.commit()
    await db.refresh(db_user)
    logger.info(f"Created {role.value} user id {db_user.id}")
    return db_user

async def update_activity_status(db: AsyncSession, *, user: User, status: UserActivityStatus) -> User:
    user.activity_status = status
    db.add(user)
    await db.commit()
    return user
