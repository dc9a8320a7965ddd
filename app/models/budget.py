"""
Budget category and budget item models
"""

from datetime import datetime
from decimal import Decimal
from sqlalchemy import Column, Integer, String, Text, Boolean, Date, DateTime, Numeric, ForeignKey
from sqlalchemy.orm import relationship

from app.core.db import Base

PAYMENT_STATUSES = {
    "pending": "Pending",
    "partial": "Partially Paid",
    "paid": "Paid",
}

PAYMENT_METHODS = {
    "cash": "Cash",
    "check": "Check",
    "credit_card": "Credit Card",
    "debit_card": "Debit Card",
    "bank_transfer": "Bank Transfer",
    "paypal": "PayPal",
    "venmo": "Venmo",
    "other": "Other",
}

DEFAULT_CATEGORIES = [
    {"name": "Venue", "icon": "building", "percentage": 30, "order": 1},
    {"name": "Catering", "icon": "utensils", "percentage": 25, "order": 2},
    {"name": "Photography & Videography", "icon": "camera", "percentage": 12, "order": 3},
    {"name": "Music & Entertainment", "icon": "music", "percentage": 8, "order": 4},
    {"name": "Flowers & Decor", "icon": "flower", "percentage": 8, "order": 5},
    {"name": "Attire & Beauty", "icon": "shirt", "percentage": 5, "order": 6},
    {"name": "Wedding Cake", "icon": "cake", "percentage": 3, "order": 7},
    {"name": "Invitations & Stationery", "icon": "mail", "percentage": 2, "order": 8},
    {"name": "Transportation", "icon": "car", "percentage": 2, "order": 9},
    {"name": "Favors & Gifts", "icon": "gift", "percentage": 2, "order": 10},
    {"name": "Rings & Jewelry", "icon": "gem", "percentage": 2, "order": 11},
    {"name": "Miscellaneous", "icon": "more-horizontal", "percentage": 1, "order": 12},
]

class BudgetCategory(Base):
    __tablename__ = "budget_categories"
    
    id = Column(Integer, primary_key=True, index=True)
    wedding_id = Column(Integer, ForeignKey("weddings.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    icon = Column(String(50), nullable=True)
    estimated_amount = Column(Numeric(12, 2), default=0)
    percentage = Column(Integer, nullable=True)  # suggested share of the total budget
    notes = Column(Text, nullable=True)
    order = Column(Integer, default=0)
    
    # Relationships
    wedding = relationship("Wedding", back_populates="budget_categories")
    items = relationship("BudgetItem", back_populates="category", cascade="all, delete-orphan")

class BudgetItem(Base):
    __tablename__ = "budget_items"
    
    id = Column(Integer, primary_key=True, index=True)
    wedding_id = Column(Integer, ForeignKey("weddings.id"), nullable=False, index=True)
    budget_category_id = Column(Integer, ForeignKey("budget_categories.id"), nullable=False)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    estimated_cost = Column(Numeric(12, 2), nullable=True)
    actual_cost = Column(Numeric(12, 2), nullable=True)
    paid_amount = Column(Numeric(12, 2), default=0, nullable=False)
    payment_status = Column(String(20), default="pending", nullable=False)
    due_date = Column(Date, nullable=True)
    is_paid = Column(Boolean, default=False)
    paid_date = Column(Date, nullable=True)
    payment_method = Column(String(50), nullable=True)
    notes = Column(Text, nullable=True)
    priority = Column(Integer, default=0)  # 0-5
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    # Relationships
    wedding = relationship("Wedding", back_populates="budget_items")
    category = relationship("BudgetCategory", back_populates="items")
    
    @property
    def effective_cost(self) -> Decimal:
        if self.actual_cost is not None:
            return self.actual_cost
        if self.estimated_cost is not None:
            return self.estimated_cost
        return Decimal("0")
    
    @property
    def balance_due(self) -> Decimal:
        return self.effective_cost - (self.paid_amount or Decimal("0"))
