from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, JSON, Enum
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from app.db.base_class import Base
from app.models.enums import InternalNotificationStatus

class InternalNotification(Base):
    """Seller-facing in-app record, one per viewing request."""
    __tablename__ = 'internal_notifications'

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True) # Recipient (seller)
    viewing_id = Column(Integer, ForeignKey("viewings.id"), nullable=False, unique=True)
    status = Column(Enum(InternalNotificationStatus), nullable=False, default=InternalNotificationStatus.VIEWING_REQUEST)
    params = Column(JSON, nullable=True)
    is_read = Column(Boolean, default=False, nullable=False)
    is_actioned = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User")
    viewing = relationship("Viewing", back_populates="internal_notification")

class PushNotification(Base):
    """Buyer-facing notification, also delivered over the socket."""
    __tablename__ = 'push_notifications'

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True) # Recipient (buyer)
    type = Column(String(50), index=True, nullable=False)
    params = Column(JSON, nullable=True)
    related_id = Column(Integer, index=True, nullable=True) # e.g. viewing id
    is_read = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User")
