# Import the Base class to make it accessible for models
# and for Alembic discovery via Base.metadata
from app.db.base_class import Base  # noqa: F401

from .user import User
from .area import Area
from .location import Location
from .workspace import WorkSpace
from .booking import Booking
from .viewing import Viewing
from .notification import InternalNotification, PushNotification
from .enums import (
    UserRole,
    UserActivityStatus,
    WorkSpaceType,
    DeskType,
    WorkSpaceStatus,
    ViewingStatus,
    BookingStatus,
    InternalNotificationStatus,
    PushNotificationType,
    NotificationEvent,
)

__all__ = [
    "Base",
    "User",
    "Area",
    "Location",
    "WorkSpace",
    "Booking",
    "Viewing",
    "InternalNotification",
    "PushNotification",
    "UserRole",
    "UserActivityStatus",
    "WorkSpaceType",
    "DeskType",
    "WorkSpaceStatus",
    "ViewingStatus",
    "BookingStatus",
    "InternalNotificationStatus",
    "PushNotificationType",
    "NotificationEvent",
]
