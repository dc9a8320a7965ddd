"""
Common Pydantic schemas
"""

from typing import Any, Optional
from pydantic import BaseModel

class StandardResponse(BaseModel):
    """Standard API response"""
    success: bool
    message: str
    data: Optional[Any] = None

class ErrorResponse(BaseModel):
    """Error response schema"""
    success: bool = False
    message: str
    error_code: Optional[str] = None
    details: Optional[Any] = None

def reject_null(value: Any) -> Any:
    """Field validator body for optional update fields backed by NOT NULL columns"""
    if value is None:
        raise ValueError("may be omitted but cannot be null")
    return value
