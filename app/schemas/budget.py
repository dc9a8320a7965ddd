"""
Budget-related Pydantic schemas
"""

from datetime import date
from decimal import Decimal
from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

from app.schemas.common import reject_null

PaymentMethod = Literal[
    "cash", "check", "credit_card", "debit_card", "bank_transfer", "paypal", "venmo", "other"
]

class CategoryCreate(BaseModel):
    """Schema for creating a budget category"""
    name: str
    icon: Optional[str] = None
    estimated_amount: Decimal = Field(Decimal("0"), ge=0)
    percentage: Optional[int] = Field(None, ge=0, le=100)
    notes: Optional[str] = None

class CategoryUpdate(BaseModel):
    """Schema for updating a budget category"""
    name: Optional[str] = None
    icon: Optional[str] = None
    estimated_amount: Optional[Decimal] = Field(None, ge=0)
    percentage: Optional[int] = Field(None, ge=0, le=100)
    notes: Optional[str] = None
    
    @field_validator("name", "estimated_amount")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)

class ItemCreate(BaseModel):
    """Schema for creating a budget item"""
    budget_category_id: int
    name: str
    description: Optional[str] = None
    estimated_cost: Optional[Decimal] = Field(None, ge=0)
    actual_cost: Optional[Decimal] = Field(None, ge=0)
    due_date: Optional[date] = None
    priority: int = Field(0, ge=0, le=5)
    notes: Optional[str] = None

class ItemUpdate(BaseModel):
    """Schema for updating a budget item"""
    budget_category_id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    estimated_cost: Optional[Decimal] = Field(None, ge=0)
    actual_cost: Optional[Decimal] = Field(None, ge=0)
    due_date: Optional[date] = None
    priority: Optional[int] = Field(None, ge=0, le=5)
    notes: Optional[str] = None
    
    @field_validator("budget_category_id", "name", "priority")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)

class ItemResponse(BaseModel):
    """Budget item response"""
    id: int
    budget_category_id: int
    name: str
    estimated_cost: Optional[Decimal] = None
    actual_cost: Optional[Decimal] = None
    paid_amount: Decimal
    payment_status: str
    is_paid: bool
    paid_date: Optional[date] = None
    payment_method: Optional[str] = None
    due_date: Optional[date] = None
    priority: int
    balance_due: Decimal
    
    class Config:
        from_attributes = True

class CategoryResponse(BaseModel):
    """Budget category with its items"""
    id: int
    name: str
    icon: Optional[str] = None
    estimated_amount: Decimal
    percentage: Optional[int] = None
    order: int
    items: List[ItemResponse] = []
    
    class Config:
        from_attributes = True

class PaymentRequest(BaseModel):
    """Payment recorded against a budget item"""
    amount: Decimal = Field(..., gt=0)
    payment_method: Optional[PaymentMethod] = None
    notes: Optional[str] = None

class TotalBudgetUpdate(BaseModel):
    total_budget: Decimal = Field(..., ge=0)
    recalculate_categories: bool = False
