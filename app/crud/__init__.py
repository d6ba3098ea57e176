# Import individual CRUD modules so they can be accessed via the package
from . import crud_user # noqa
from . import crud_area # noqa
from . import crud_location # noqa
from . import crud_workspace # noqa
from . import crud_viewing # noqa
from . import crud_notification # noqa

__all__ = [
    "crud_user",
    "crud_area",
    "crud_location",
    "crud_workspace",
    "crud_viewing",
    "crud_notification",
]
