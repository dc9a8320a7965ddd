"""
Guest-related Pydantic schemas
"""

from typing import Literal, Optional
from pydantic import BaseModel, field_validator

from app.schemas.common import reject_null

GuestSide = Literal["bride", "groom", "both"]
RsvpStatus = Literal["pending", "confirmed", "declined", "maybe"]

class GuestCreate(BaseModel):
    """Schema for creating a guest"""
    first_name: str
    last_name: str
    email: Optional[str] = None
    group: Optional[str] = None
    side: Optional[GuestSide] = None
    rsvp_status: RsvpStatus = "pending"
    plus_one_count: int = 0
    dietary_restrictions: Optional[str] = None
    meal_choice: Optional[str] = None

class GuestUpdate(BaseModel):
    """Schema for updating a guest"""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    group: Optional[str] = None
    side: Optional[GuestSide] = None
    rsvp_status: Optional[RsvpStatus] = None
    dietary_restrictions: Optional[str] = None
    meal_choice: Optional[str] = None
    
    @field_validator("first_name", "last_name", "rsvp_status")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)

class GuestResponse(BaseModel):
    """Guest response schema"""
    id: int
    first_name: str
    last_name: str
    full_name: str
    group: Optional[str] = None
    side: Optional[str] = None
    rsvp_status: str
    table_id: Optional[int] = None
    seat_number: Optional[int] = None
    
    class Config:
        from_attributes = True
