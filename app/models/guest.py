"""
Guest model
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from app.core.db import Base

GUEST_GROUPS = ["family", "friends", "coworkers", "neighbors", "other"]
GUEST_SIDES = ["bride", "groom", "both"]
RSVP_STATUSES = ["pending", "confirmed", "declined", "maybe"]

class Guest(Base):
    __tablename__ = "guests"
    
    id = Column(Integer, primary_key=True, index=True)
    wedding_id = Column(Integer, ForeignKey("weddings.id"), nullable=False, index=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    group = Column(String(50), nullable=True)
    side = Column(String(20), nullable=True)
    rsvp_status = Column(String(20), default="pending", nullable=False)
    plus_one_count = Column(Integer, default=0)
    dietary_restrictions = Column(String(255), nullable=True)
    meal_choice = Column(String(100), nullable=True)
    table_id = Column(Integer, ForeignKey("seating_tables.id", ondelete="SET NULL"), nullable=True)
    seat_number = Column(Integer, nullable=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    # Relationships
    wedding = relationship("Wedding", back_populates="guests")
    table = relationship("SeatingTable", back_populates="guests")
    
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
