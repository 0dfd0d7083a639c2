from pydantic import BaseModel
from typing import Generic, Optional, TypeVar

T = TypeVar('T')


class Envelope(BaseModel, Generic[T]):
    """Standard success wrapper: ``{"status": "ok", "data": ...}``"""
    status: str = "ok"
    data: Optional[T] = None
    error: Optional[str] = None
