"""
Common Pydantic Schemas
"""

from datetime import datetime
from typing import Optional, List, Any, Generic, TypeVar
from pydantic import BaseModel, ConfigDict

T = TypeVar('T')

class BaseResponse(BaseModel, Generic[T]):
    """Envelope wrapping every API response"""
    status: bool = True
    message: Optional[str] = "Success"
    data: Optional[T] = None

class ErrorResponse(BaseResponse[Any]):
    """Envelope returned by the exception handlers"""
    status: bool = False

class PaginatedResponse(BaseModel, Generic[T]):
    """Paginated response model"""
    items: List[T]
    total: int
    page: int = 1
    size: int = 10
    has_next: bool = False
    has_prev: bool = False

class TimestampMixin(BaseModel):
    """Timestamp fields mixin"""
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
