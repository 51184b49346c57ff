"""Checkout and order lookup router."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from src.crudhub.api.http.deps import get_checkout_service
from src.crudhub.core.services import CheckoutService
from src.crudhub.entities.service.order import CheckoutRequest, Order

router = APIRouter(tags=["checkout"])


class CheckoutResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(alias="sessionId")
    order_id: str = Field(alias="orderId")


@router.post("/checkout", response_model=CheckoutResponse, response_model_by_alias=True)
async def checkout(
    request: CheckoutRequest,
    service: CheckoutService = Depends(get_checkout_service),
) -> CheckoutResponse:
    """Create a payment session for the cart; the client redirects to it."""
    order = await service.checkout(request)
    return CheckoutResponse(session_id=order.session_id, order_id=order.id)


@router.get("/orders/{order_id}", response_model=Order)
def get_order(
    order_id: str,
    service: CheckoutService = Depends(get_checkout_service),
) -> Order:
    return service.get_order(order_id)
