"""
Seating-related Pydantic schemas
"""

from decimal import Decimal
from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

from app.schemas.common import reject_null
from app.schemas.guest import GuestResponse

TableShape = Literal["round", "rectangular", "square", "oval", "u_shape", "head_table"]
AutoAssignStrategy = Literal["by_group", "by_side", "random", "group", "side"]

class TableCreate(BaseModel):
    """Schema for creating a seating table"""
    name: str
    capacity: int = Field(..., ge=1)
    shape: TableShape = "round"
    location: Optional[str] = None
    notes: Optional[str] = None

class TableUpdate(BaseModel):
    """Schema for updating a seating table"""
    name: Optional[str] = None
    capacity: Optional[int] = Field(None, ge=1)
    shape: Optional[TableShape] = None
    location: Optional[str] = None
    notes: Optional[str] = None
    
    @field_validator("name", "capacity", "shape")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)

class TableResponse(BaseModel):
    """Seating table with its seated guests"""
    id: int
    name: str
    shape: str
    capacity: int
    location: Optional[str] = None
    position_x: Optional[Decimal] = None
    position_y: Optional[Decimal] = None
    order: int
    seats_filled: int
    available_seats: int
    guests: List[GuestResponse] = []
    
    class Config:
        from_attributes = True

class AssignGuestRequest(BaseModel):
    """Manual guest assignment"""
    guest_id: int
    seat_number: Optional[int] = Field(None, ge=1)

class AutoAssignRequest(BaseModel):
    """Auto-assignment request"""
    strategy: AutoAssignStrategy
    seed: Optional[int] = None

class TablePosition(BaseModel):
    """Chart coordinates for one table"""
    id: int
    position_x: Decimal
    position_y: Decimal

class PositionsUpdate(BaseModel):
    tables: List[TablePosition]
