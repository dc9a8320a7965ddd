"""
Wedding-related Pydantic schemas
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field

class WeddingCreate(BaseModel):
    """Schema for creating a wedding"""
    title: str
    bride_name: str
    groom_name: str
    wedding_date: Optional[date] = None
    total_budget: Optional[Decimal] = Field(None, ge=0)
    currency: Optional[str] = Field(None, min_length=3, max_length=3)

class WeddingResponse(BaseModel):
    """Basic wedding response"""
    id: int
    title: str
    bride_name: str
    groom_name: str
    wedding_date: Optional[date] = None
    status: str
    total_budget: Optional[Decimal] = None
    currency: str
    created_at: datetime
    
    class Config:
        from_attributes = True

class WeddingDetail(WeddingResponse):
    """Wedding response with planning counts"""
    total_guests: int
    confirmed_guests: int
    total_tables: int
    days_until_wedding: Optional[int] = None
