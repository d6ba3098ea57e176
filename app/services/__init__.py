from . import validation
from . import ownership
from . import notifier
from . import user_status_service
from . import workspace_service
from . import location_service
from . import viewing_service

__all__ = [
    "validation",
    "ownership",
    "notifier",
    "user_status_service",
    "workspace_service",
    "location_service",
    "viewing_service",
]
