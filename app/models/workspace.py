from sqlalchemy import Integer, String, Float, DateTime, ForeignKey, Text, JSON
from sqlalchemy.orm import relationship, Mapped, mapped_column
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime
from app.db.base_class import Base
from app.models.enums import WorkSpaceType, WorkSpaceStatus

if TYPE_CHECKING:
    from .location import Location
    from .viewing import Viewing
    from .booking import Booking

class WorkSpace(Base):
    __tablename__ = 'workspaces'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    location_id: Mapped[int] = mapped_column(ForeignKey('locations.id'), index=True)
    # Plain string rather than an enum column: rows written by older imports may hold other values.
    type: Mapped[str] = mapped_column(String(32))
    desk_type: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    quantity: Mapped[int] = mapped_column(Integer, default=1)
    price: Mapped[float] = mapped_column(Float)
    size: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    capacity: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    opens_from: Mapped[Optional[str]] = mapped_column(String(5), nullable=True)
    closes_at: Mapped[Optional[str]] = mapped_column(String(5), nullable=True)
    min_contract_length: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    available_from: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    facilities: Mapped[Optional[List[str]]] = mapped_column(JSON, nullable=True)
    description: Mapped[str] = mapped_column(Text)
    status: Mapped[str] = mapped_column(String(16), default=WorkSpaceStatus.ACTIVE.value)

    location: Mapped["Location"] = relationship(back_populates="workspaces")
    viewings: Mapped[List["Viewing"]] = relationship(back_populates="workspace", cascade="all, delete-orphan")
    bookings: Mapped[List["Booking"]] = relationship(back_populates="workspace", cascade="all, delete-orphan")

    @property
    def workspace_info(self) -> str:
        if self.type == WorkSpaceType.DESK.value:
            desk_label = (self.desk_type or "desk").replace("_", " ")
            return f"{desk_label.capitalize()} x{self.quantity}"
        if self.type == WorkSpaceType.PRIVATE_OFFICE.value:
            return f"Private office for {self.capacity}"
        if self.type == WorkSpaceType.MEETING_ROOM.value:
            return f"Meeting room for {self.capacity}"
        return self.type

    def __repr__(self) -> str:
        return f"<WorkSpace(id={self.id}, type='{self.type}')>"
