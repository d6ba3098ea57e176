from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from app.db.base_class import Base
from app.models.enums import ViewingStatus
from datetime import datetime

class Viewing(Base):
    __tablename__ = "viewings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)  # Buyer
    workspace_id = Column(Integer, ForeignKey("workspaces.id"), nullable=True, index=True)
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=True)
    phone = Column(String(20), nullable=True)
    status = Column(Enum(ViewingStatus), default=ViewingStatus.PENDING, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="viewings")
    workspace = relationship("WorkSpace", back_populates="viewings")
    internal_notification = relationship(
        "InternalNotification", back_populates="viewing", uselist=False, cascade="all, delete-orphan"
    )
