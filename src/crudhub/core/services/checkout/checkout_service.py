from loguru import logger
from sqlmodel import Session
from starlette.concurrency import run_in_threadpool

from src.crudhub.core.errors import NotFound, ValidationError
from src.crudhub.core.services.checkout.payment_provider import PaymentProvider
from src.crudhub.core.services.validation import check_price, is_blank
from src.crudhub.entities.service.order import (
    CheckoutRequest,
    LineItem,
    Order,
    OrderRepository,
)
from src.crudhub.runtime.context import get_config


class CheckoutService:
    """Hands a cart to the payment provider and records the resulting order."""

    def __init__(self, db_session: Session, payment_provider: PaymentProvider):
        self._db_session = db_session
        self._order_repo = OrderRepository(db_session)
        self._payment_provider = payment_provider

    @staticmethod
    def to_line_items(request: CheckoutRequest) -> list[LineItem]:
        if not request.items:
            raise ValidationError.missing("items")

        items = []
        for index, line in enumerate(request.items):
            missing = [
                f"items[{index}].{name}"
                for name in ("name", "price")
                if is_blank(getattr(line, name))
            ]
            if missing:
                raise ValidationError.missing(*missing)
            quantity = 1 if line.quantity is None else line.quantity
            if quantity < 1:
                raise ValidationError(
                    f"items[{index}].quantity must be >= 1", {"quantity": quantity}
                )
            check_price(line.price, f"items[{index}].price")
            items.append(
                LineItem(
                    product_id=line.product_id,
                    name=line.name,
                    price=line.price,
                    quantity=quantity,
                )
            )
        return items

    async def checkout(self, request: CheckoutRequest) -> Order:
        """Create a provider checkout session and persist a pending order.

        Nothing is persisted when the provider call fails.
        """
        items = self.to_line_items(request)
        client_url = get_config().app.client_url.rstrip("/")
        payment = get_config().payment

        session_id = await self._payment_provider.create_checkout_session(
            items,
            success_url=f"{client_url}{payment.success_path}",
            cancel_url=f"{client_url}{payment.cancel_path}",
        )

        return await run_in_threadpool(self._record_order, items, session_id)

    def _record_order(self, items: list[LineItem], session_id: str) -> Order:
        # Runs in a worker thread
        order = self._order_repo.create(Order(items=items, session_id=session_id))
        self._db_session.commit()
        logger.info("Recorded order {} for checkout session {}", order.id, session_id)
        return order

    def get_order(self, order_id: str) -> Order:
        order = self._order_repo.get(order_id)
        if order is None:
            raise NotFound("Order", order_id)
        return order
