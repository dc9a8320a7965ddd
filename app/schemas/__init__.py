"""
Pydantic schemas package
"""

from .common import *
from .wedding import *
from .guest import *
from .seating import *
from .budget import *

__all__ = [
    "StandardResponse",
    "ErrorResponse",
    "WeddingCreate",
    "WeddingResponse",
    "WeddingDetail",
    "GuestCreate",
    "GuestUpdate",
    "GuestResponse",
    "TableCreate",
    "TableUpdate",
    "TableResponse",
    "AssignGuestRequest",
    "AutoAssignRequest",
    "TablePosition",
    "PositionsUpdate",
    "CategoryCreate",
    "CategoryUpdate",
    "ItemCreate",
    "ItemUpdate",
    "ItemResponse",
    "CategoryResponse",
    "PaymentRequest",
    "TotalBudgetUpdate",
]
