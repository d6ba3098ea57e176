from pydantic import ConfigDict, Field, ValidationInfo, field_validator
from typing import Optional

from app.schemas.common import CamelModel
from app.utils.dates import MAX_TIMESTAMP

class ViewingCreate(CamelModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    start_time: int = Field(gt=0, le=MAX_TIMESTAMP)
    end_time: Optional[int] = Field(default=None, le=MAX_TIMESTAMP)
    phone: str = Field(min_length=1, max_length=20)

    @field_validator("end_time")
    @classmethod
    def end_after_start(cls, value: Optional[int], info: ValidationInfo) -> Optional[int]:
        start_time = info.data.get("start_time")
        if value is not None and start_time is not None and value < start_time:
            raise ValueError("End time cannot be earlier than start time")
        return value

class ViewingListItem(CamelModel):
    id: int
    start_time: int
    end_time: Optional[int] = None
    phone: Optional[str] = None
    status: str
    meeting_name: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
