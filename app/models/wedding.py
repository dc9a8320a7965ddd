"""
Wedding model
"""

from datetime import datetime, date
from typing import Optional
from sqlalchemy import Column, Integer, String, Date, DateTime, Numeric
from sqlalchemy.orm import relationship

from app.core.config import settings
from app.core.db import Base

class Wedding(Base):
    __tablename__ = "weddings"
    
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    bride_name = Column(String(255), nullable=False)
    groom_name = Column(String(255), nullable=False)
    wedding_date = Column(Date, nullable=True)
    status = Column(String(50), default="planning")  # planning, confirmed, completed, cancelled
    total_budget = Column(Numeric(12, 2), nullable=True)
    currency = Column(String(3), default=settings.DEFAULT_CURRENCY)
    created_at = Column(DateTime, default=datetime.utcnow)
    
    # Relationships
    seating_tables = relationship("SeatingTable", back_populates="wedding", cascade="all, delete-orphan")
    guests = relationship("Guest", back_populates="wedding", cascade="all, delete-orphan")
    budget_categories = relationship("BudgetCategory", back_populates="wedding", cascade="all, delete-orphan")
    budget_items = relationship("BudgetItem", back_populates="wedding", cascade="all, delete-orphan")
    
    @property
    def confirmed_guests_count(self) -> int:
        return sum(1 for guest in self.guests if guest.rsvp_status == "confirmed")
    
    def days_until_wedding(self, today: Optional[date] = None) -> Optional[int]:
        """Days left until the wedding date, negative once it has passed"""
        if self.wedding_date is None:
            return None
        today = today or date.today()
        return (self.wedding_date - today).days
