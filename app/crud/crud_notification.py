from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
import logging

from app.models.notification import InternalNotification, PushNotification
from app.models.enums import InternalNotificationStatus, PushNotificationType

logger = logging.getLogger(__name__)

async def create_internal_notification(
    db: AsyncSession,
    *,
    user_id: int,
    viewing_id: int,
    params: dict,
) -> InternalNotification:
    """Create the seller's in-app record for a new viewing request."""
    db_notification = InternalNotification(
        user_id=user_id,
        viewing_id=viewing_id,
        status=InternalNotificationStatus.VIEWING_REQUEST,
        params=params,
        is_read=False,
        is_actioned=False,
    )
    db.add(db_notification)
    await db.commit()
    await db.refresh(db_notification)
    logger.info(f"Created internal notification id {db_notification.id} for user {user_id}")
    return db_notification

async def change_internal_notification_status(
    db: AsyncSession,
    *,
    notification: Optional[InternalNotification],
    status: InternalNotificationStatus,
    params: dict,
) -> Optional[InternalNotification]:
    """Move the record to its new status. Acting on a request implies it has been read."""
    if notification is None:
        logger.warning(f"No internal notification to move to '{status.value}'")
        return None
    notification.status = status
    notification.params = params
    notification.is_actioned = True
    notification.is_read = True
    db.add(notification)
    await db.commit()
    logger.info(f"Internal notification id {notification.id} moved to '{status.value}'")
    return notification

async def create_push_notification(
    db: AsyncSession,
    *,
    user_id: int,
    params: dict,
    type: PushNotificationType,
    related_id: Optional[int] = None,
) -> PushNotification:
    db_notification = PushNotification(
        user_id=user_id,
        type=type.value,
        params=params,
        related_id=related_id,
        is_read=False,
    )
    db.add(db_notification)
    await db.commit()
    await db.refresh(db_notification)
    logger.info(f"Created push notification id {db_notification.id} for user {user_id}")
    return db_notification

