"""Entity package: Order."""

from .entity import CheckoutRequest, LineItem, Order, OrderStatus
from .repository import OrderRepository
from .table import OrderTable

__all__ = [
    "CheckoutRequest",
    "LineItem",
    "Order",
    "OrderRepository",
    "OrderStatus",
    "OrderTable",
]
