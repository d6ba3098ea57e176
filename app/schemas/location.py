from __future__ import annotations
from pydantic import ConfigDict, Field, field_validator
from typing import List, Optional, Any

from app.models.enums import WorkSpaceType
from app.schemas.common import CamelModel

class NearbyPlace(CamelModel):
    type: Optional[str] = None
    name: Optional[str] = None
    distance: Optional[str] = None
    duration: Optional[str] = None

class LocationPayload(CamelModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    @field_validator("work_space_types", mode="before", check_fields=False)
    @classmethod
    def split_work_space_types(cls, value: Any) -> Any:
        # The portal form posts "desk, private-office" as a single string
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

class LocationCreate(LocationPayload):
    name: str = Field(min_length=1, max_length=255)
    address: str = Field(min_length=1, max_length=255)
    optional_address: Optional[str] = Field(default=None, max_length=255)
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    town: str = Field(min_length=1, max_length=100)
    postcode: str = Field(min_length=1, max_length=10)
    description: str = Field(min_length=1)
    area: str = Field(min_length=1)
    nearby: Optional[List[NearbyPlace]] = None
    work_space_types: Optional[List[WorkSpaceType]] = None

class LocationUpdate(LocationPayload):
    # Same rules as LocationCreate, but every field is optional. An explicit null is
    # rejected for the non-nullable columns because None defaults are not validated.
    name: str = Field(default=None, min_length=1, max_length=255)
    address: str = Field(default=None, min_length=1, max_length=255)
    optional_address: Optional[str] = Field(default=None, max_length=255)
    latitude: float = Field(default=None, ge=-90, le=90)
    longitude: float = Field(default=None, ge=-180, le=180)
    town: str = Field(default=None, min_length=1, max_length=100)
    postcode: str = Field(default=None, min_length=1, max_length=10)
    description: str = Field(default=None, min_length=1)
    area: Optional[str] = None
    nearby: Optional[List[NearbyPlace]] = None
    work_space_types: Optional[List[WorkSpaceType]] = None

class LocationCreated(CamelModel):
    id: int

class LocationDetail(CamelModel):
    id: int
    name: str
    address: str
    optional_address: Optional[str] = None
    latitude: float
    longitude: float
    town: str
    area: str = ""
    postcode: str
    description: str
    work_space_types: List[str] = []

class DeskRow(CamelModel):
    id: int
    quantity: int
    type: Optional[str] = None
    price: float
    status: str
    bookings: int
    viewing: int

class RoomRow(CamelModel):
    id: int
    quantity: int
    size: Optional[int] = None
    price: float
    status: str
    bookings: int
    viewing: int

class SellerLocation(CamelModel):
    id: int
    name: str
    address: str
    postcode: str
    desks: List[DeskRow] = []
    meeting_rooms: List[RoomRow] = []
    private_offices: List[RoomRow] = []

class SellerLocationListResponse(CamelModel):
    locations: List[SellerLocation]
