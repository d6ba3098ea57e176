import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app import crud, models
from app.models.enums import UserActivityStatus

logger = logging.getLogger(__name__)


async def change_status(db: AsyncSession, *, user: models.User, status: UserActivityStatus) -> models.User:
    """Sets the user's coarse activity flag. The flag is global, not per workspace."""
    if user.activity_status == status:
        return user
    previous = user.activity_status
    await crud.crud_user.update_activity_status(db, user=user, status=status)
    logger.info(f"User {user.id} activity status changed from {previous} to {status.value}")
    return user
