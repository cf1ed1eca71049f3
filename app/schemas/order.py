from typing import List
from uuid import UUID
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict
from app.models.order import OrderStatus
from .user import UserSummary


class OrderItemCreate(BaseModel):
    product_id: UUID
    quantity: int = Field(..., gt=0)


class OrderCreate(BaseModel):
    items: List[OrderItemCreate] = Field(..., min_length=1)


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


class OrderItemResponse(BaseModel):
    id: UUID
    product_id: UUID
    quantity: int
    sale_price: int

    model_config = ConfigDict(from_attributes=True)


class OrderBase(BaseModel):
    id: UUID
    user_id: UUID
    total_value: int
    status: OrderStatus
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrderResponse(OrderBase):
    items: List[OrderItemResponse]


class OrderWithUser(OrderBase):
    user: UserSummary
