from sqlmodel import Session

from .entity import Order
from .table import OrderTable


class OrderRepository:
    """Data-access layer for orders."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, order_id: str) -> Order | None:
        row = self._session.get(OrderTable, order_id)
        if row is None:
            return None
        return Order.model_validate(row, from_attributes=True)

    def create(self, order: Order) -> Order:
        data = order.model_dump()
        data["status"] = order.status.value
        row = OrderTable.model_validate(data)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Order.model_validate(row, from_attributes=True)
