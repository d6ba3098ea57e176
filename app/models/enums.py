import enum


class UserRole(str, enum.Enum):
    SELLER = "SELLER"
    BUYER = "BUYER"
    ADMIN = "ADMIN"


class UserActivityStatus(str, enum.Enum):
    """Coarse buyer progress flag shown to the sales team."""
    NEW = "NEW"
    BOOKED_VIEWING = "BOOKED_VIEWING"
    BOOKED_WORKSPACE = "BOOKED_WORKSPACE"


class WorkSpaceType(str, enum.Enum):
    DESK = "desk"
    PRIVATE_OFFICE = "private-office"
    MEETING_ROOM = "meeting-room"


class DeskType(str, enum.Enum):
    HOURLY_HOT_DESK = "hourly_hot_desk"
    MONTHLY_HOT_DESK = "monthly_hot_desk"
    MONTHLY_FIXED_DESK = "monthly_fixed_desk"


class WorkSpaceStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class ViewingStatus(str, enum.Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    CANCELED = "canceled"


class BookingStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELED = "canceled"


class InternalNotificationStatus(str, enum.Enum):
    VIEWING_REQUEST = "viewing_request"
    VIEWING_ACCEPTED = "viewing_accepted"
    VIEWING_DECLINED = "viewing_declined"


class PushNotificationType(str, enum.Enum):
    VIEWING_ACCEPTED = "viewing_accepted"


class NotificationEvent(str, enum.Enum):
    """Email events sent through the notifier."""
    LOCATION_ADDED = "location_added"
    LOCATION_DELETED = "location_deleted"
    VIEWING_REQUEST = "viewing_request"
    VIEWING_APPROVED = "viewing_approved"
