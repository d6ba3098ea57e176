from sqlalchemy import Integer, String, Float, DateTime, ForeignKey, Text, JSON
from sqlalchemy.orm import relationship, Mapped, mapped_column
from typing import Optional, List, TYPE_CHECKING
from sqlalchemy.sql import func
from datetime import datetime
from app.db.base_class import Base

if TYPE_CHECKING:
    from .user import User
    from .area import Area
    from .workspace import WorkSpace

class Location(Base):
    __tablename__ = 'locations'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    area_id: Mapped[Optional[int]] = mapped_column(ForeignKey("areas.id"), nullable=True)
    name: Mapped[str] = mapped_column(String, index=True)
    address: Mapped[str] = mapped_column(String)
    optional_address: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    latitude: Mapped[float] = mapped_column(Float)
    longitude: Mapped[float] = mapped_column(Float)
    town: Mapped[str] = mapped_column(String)
    postcode: Mapped[str] = mapped_column(String(10))
    description: Mapped[str] = mapped_column(Text)
    # [{"type": "subway_station", "name": "...", "distance": "1.4 km", "duration": "18 mins"}]
    nearby: Mapped[Optional[List[dict]]] = mapped_column(JSON, nullable=True)
    work_space_types: Mapped[Optional[List[str]]] = mapped_column(JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=func.now())

    user: Mapped["User"] = relationship(back_populates="locations")
    area: Mapped[Optional["Area"]] = relationship()
    workspaces: Mapped[List["WorkSpace"]] = relationship(back_populates="location", cascade="all, delete-orphan")

    def __repr__(self) -> str:
        return f"<Location(id={self.id}, name='{self.name}')>"
