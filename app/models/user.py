from sqlalchemy import Boolean, Column, Integer, String, DateTime, func, Enum as SQLEnum
from sqlalchemy.orm import relationship
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .location import Location
    from .viewing import Viewing
    from .booking import Booking

from app.db.base_class import Base
from .enums import UserRole, UserActivityStatus

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    full_name = Column(String, index=True, nullable=True)
    phone = Column(String(20), nullable=True)
    role = Column(SQLEnum(UserRole), nullable=False, default=UserRole.BUYER)
    activity_status = Column(SQLEnum(UserActivityStatus), nullable=False, default=UserActivityStatus.NEW)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=func.now())

    locations = relationship("Location", back_populates="user", cascade="all, delete-orphan")
    viewings = relationship("Viewing", back_populates="user")
    bookings = relationship("Booking", back_populates="user")

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
