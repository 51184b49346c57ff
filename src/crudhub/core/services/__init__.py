"""Core services exports."""

from .auth.auth_service import AuthService
from .catalog.product_service import ProductService
from .checkout.checkout_service import CheckoutService
from .checkout.payment_provider import (
    HttpPaymentProvider,
    LocalPaymentProvider,
    PaymentProvider,
    build_payment_provider,
)
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService
from .jwt import JwtGeneratorService, JwtVerificationService
from .projects.project_service import ProjectService

__all__ = [
    "AuthService",
    "CheckoutService",
    "DbManageService",
    "DbSessionService",
    "HttpPaymentProvider",
    "JwtGeneratorService",
    "JwtVerificationService",
    "LocalPaymentProvider",
    "PaymentProvider",
    "ProductService",
    "ProjectService",
    "build_payment_provider",
]
