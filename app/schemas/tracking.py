from pydantic import BaseModel, Field

from app.core.tracking import CartAction


class OrderEvent(BaseModel):
    value: int = Field(ge=0, description="Order value in the smallest currency unit")


class CartEvent(BaseModel):
    action: CartAction


class TrackedEvent(BaseModel):
    event: str
    recorded: bool = True
