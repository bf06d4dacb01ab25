"""
Order domain models.

Products and customers are immutable values; an ``Order`` changes status over
its lifetime, so it is the only mutable model here.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class Customer(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: str
    address: str


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    price: float = Field(ge=0)
    description: str = ""
    in_stock: bool = True


class OrderItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    product: Product
    quantity: int = Field(gt=0)
    unit_price: float = Field(ge=0)

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity


class Order(BaseModel):
    id: str
    customer: Customer
    items: List[OrderItem]
    total_amount: float
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


def calculate_total(items: List[OrderItem]) -> float:
    return sum(item.line_total for item in items)
