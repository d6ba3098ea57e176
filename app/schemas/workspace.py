from pydantic import ConfigDict, Field
from typing import List, Optional

from app.models.enums import WorkSpaceType, DeskType
from app.schemas.common import CamelModel
from app.utils.dates import MAX_TIMESTAMP

# Fields a workspace type cannot be saved without, on top of the common ones.
REQUIRED_BY_TYPE = {
    WorkSpaceType.DESK: ("desk_type",),
    WorkSpaceType.PRIVATE_OFFICE: ("size", "capacity", "min_contract_length", "available_from"),
    WorkSpaceType.MEETING_ROOM: ("size", "capacity"),
}

MONTHLY_DESK_TYPES = (DeskType.MONTHLY_HOT_DESK, DeskType.MONTHLY_FIXED_DESK)

class WorkSpaceCreate(CamelModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    type: WorkSpaceType
    quantity: int = Field(gt=0)
    price: float = Field(ge=0)
    description: str = Field(min_length=1)
    desk_type: Optional[DeskType] = None
    size: Optional[int] = Field(default=None, gt=0)
    capacity: Optional[int] = Field(default=None, gt=0)
    opens_from: Optional[str] = Field(default=None, pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    closes_at: Optional[str] = Field(default=None, pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    min_contract_length: Optional[int] = Field(default=None, ge=1)
    available_from: Optional[int] = Field(default=None, ge=0, le=MAX_TIMESTAMP)
    facilities: Optional[List[str]] = None

    def missing_fields(self) -> List[str]:
        """Field names required by this workspace type but absent from the payload."""
        required = list(REQUIRED_BY_TYPE.get(self.type, ()))
        if self.type == WorkSpaceType.DESK and self.desk_type in MONTHLY_DESK_TYPES:
            required.append("min_contract_length")
        return [field for field in required if getattr(self, field) is None]

class WorkSpaceCreated(CamelModel):
    id: int
