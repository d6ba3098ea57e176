from pydantic import Field
from datetime import datetime
from typing import Optional

from app.models.enums import InternalNotificationStatus
from app.schemas.common import CamelModel

class InternalNotification(CamelModel):
    id: int
    viewing_id: int
    status: InternalNotificationStatus
    params: Optional[dict] = None
    is_read: bool
    is_actioned: bool
    created_at: Optional[datetime] = None

class ViewingStatusResponse(CamelModel):
    internal_notification: Optional[InternalNotification] = None

class PushNotification(CamelModel):
    id: int
    type: str
    params: Optional[dict] = None
    related_id: Optional[int] = Field(default=None)
    is_read: bool
