"""Payment provider clients creating hosted checkout sessions."""

from typing import Protocol

import httpx
from loguru import logger

from src.crudhub.core.errors import UpstreamError
from src.crudhub.core.security import generate_secure_token
from src.crudhub.entities.service.order import LineItem
from src.crudhub.runtime.config.config_data import PaymentConfig


class PaymentProvider(Protocol):
    async def create_checkout_session(
        self, items: list[LineItem], success_url: str, cancel_url: str
    ) -> str:
        """Create a checkout session and return its identifier."""
        ...


def encode_line_items(items: list[LineItem], currency: str) -> dict[str, str]:
    """Flatten line items into the bracketed form fields a Stripe-style API expects."""
    form: dict[str, str] = {}
    for index, item in enumerate(items):
        prefix = f"line_items[{index}]"
        form[f"{prefix}[price_data][currency]"] = currency
        form[f"{prefix}[price_data][product_data][name]"] = item.name
        # Amounts are sent in the smallest currency unit
        form[f"{prefix}[price_data][unit_amount]"] = str(round(item.price * 100))
        form[f"{prefix}[quantity]"] = str(item.quantity)
    return form


class HttpPaymentProvider:
    """Creates checkout sessions on a remote provider over HTTP."""

    def __init__(
        self,
        config: PaymentConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._config = config
        self._transport = transport

    async def create_checkout_session(
        self, items: list[LineItem], success_url: str, cancel_url: str
    ) -> str:
        form = encode_line_items(items, self._config.currency)
        form.update(
            {
                "mode": "payment",
                "payment_method_types[0]": "card",
                "success_url": success_url,
                "cancel_url": cancel_url,
            }
        )
        headers = {"Content-Type": "application/x-www-form-urlencoded"}
        if self._config.api_key:
            headers["Authorization"] = f"Bearer {self._config.api_key}"

        try:
            async with httpx.AsyncClient(
                timeout=self._config.timeout_seconds, transport=self._transport
            ) as client:
                response = await client.post(self._config.api_url, data=form, headers=headers)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Payment provider rejected checkout session: {}", e.response.status_code
            )
            raise UpstreamError(
                "Payment provider rejected the checkout session",
                {"status_code": e.response.status_code},
            ) from e
        except httpx.HTTPError as e:
            logger.error("Payment provider unreachable: {}", e)
            raise UpstreamError("Payment provider unreachable") from e
        except ValueError as e:
            raise UpstreamError("Payment provider returned invalid JSON") from e

        session_id = payload.get("id") if isinstance(payload, dict) else None
        if not session_id:
            raise UpstreamError("Payment provider response has no session id")
        return session_id


class LocalPaymentProvider:
    """Issues local session ids when no external provider is configured."""

    async def create_checkout_session(
        self, items: list[LineItem], success_url: str, cancel_url: str
    ) -> str:
        session_id = f"cs_local_{generate_secure_token(18)}"
        logger.debug("Issued local checkout session {} for {} items", session_id, len(items))
        return session_id


def build_payment_provider(config: PaymentConfig) -> PaymentProvider:
    if config.enabled:
        logger.info("Using HTTP payment provider at {}", config.api_url)
        return HttpPaymentProvider(config)
    logger.info("Payment provider disabled; issuing local checkout sessions")
    return LocalPaymentProvider()
