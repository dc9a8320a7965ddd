"""
Seating table model
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime, Numeric, ForeignKey
from sqlalchemy.orm import relationship

from app.core.db import Base

TABLE_SHAPES = {
    "round": "Round",
    "rectangular": "Rectangular",
    "square": "Square",
    "oval": "Oval",
    "u_shape": "U-Shape",
    "head_table": "Head Table",
}

class SeatingTable(Base):
    __tablename__ = "seating_tables"
    
    id = Column(Integer, primary_key=True, index=True)
    wedding_id = Column(Integer, ForeignKey("weddings.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)  # Table 1, Head Table, etc.
    shape = Column(String(50), default="round")
    capacity = Column(Integer, nullable=False)
    location = Column(String(255), nullable=True)
    position_x = Column(Numeric(8, 2), nullable=True)
    position_y = Column(Numeric(8, 2), nullable=True)
    notes = Column(Text, nullable=True)
    order = Column(Integer, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)
    
    # Relationships
    wedding = relationship("Wedding", back_populates="seating_tables")
    guests = relationship("Guest", back_populates="table")
    
    @property
    def seats_filled(self) -> int:
        return len(self.guests)
    
    @property
    def available_seats(self) -> int:
        return self.capacity - self.seats_filled
    
    @property
    def is_full(self) -> bool:
        return self.available_seats <= 0
