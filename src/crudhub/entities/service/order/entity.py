"""Entity: Order and its line items."""

from enum import Enum

from pydantic import BaseModel, Field

from src.crudhub.entities.core._base import Entity


class OrderStatus(str, Enum):
    PENDING = "pending"


class LineItem(BaseModel):
    """One cart line handed to the payment provider."""

    product_id: str | None = Field(default=None, description="Referenced product, if any")
    name: str
    price: float = Field(ge=0)
    quantity: int = Field(default=1, ge=1)

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity


class Order(Entity):
    """Record of a checkout handed off to the payment provider."""

    items: list[LineItem]
    session_id: str = Field(description="Payment provider checkout session id")
    status: OrderStatus = OrderStatus.PENDING

    @property
    def total(self) -> float:
        return sum(item.subtotal for item in self.items)


class CheckoutLine(BaseModel):
    product_id: str | None = None
    name: str | None = None
    price: float | None = None
    quantity: int | None = None


class CheckoutRequest(BaseModel):
    """Request body for checkout. Presence and ranges are checked by the service."""

    items: list[CheckoutLine] = Field(default_factory=list)
