"""FastAPI dependency implementations."""

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.crudhub.api.http.app_data import ApplicationDependencies
from src.crudhub.core.errors import InvalidCredentials
from src.crudhub.core.services import (
    AuthService,
    CheckoutService,
    JwtGeneratorService,
    JwtVerificationService,
    PaymentProvider,
    ProductService,
    ProjectService,
)


def _app_deps(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield one database session per request."""
    session = _app_deps(request).database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_jwt_generation_service(request: Request) -> JwtGeneratorService:
    return _app_deps(request).jwt_generation_service


def get_jwt_verify_service(request: Request) -> JwtVerificationService:
    return _app_deps(request).jwt_verify_service


def get_payment_provider(request: Request) -> PaymentProvider:
    return _app_deps(request).payment_provider


def get_product_service(db: Session = Depends(get_db_session)) -> ProductService:
    return ProductService(db)


def get_project_service(db: Session = Depends(get_db_session)) -> ProjectService:
    return ProjectService(db)


def get_auth_service(
    db: Session = Depends(get_db_session),
    jwt_generator: JwtGeneratorService = Depends(get_jwt_generation_service),
    jwt_verifier: JwtVerificationService = Depends(get_jwt_verify_service),
) -> AuthService:
    return AuthService(db, jwt_generator, jwt_verifier)


def get_checkout_service(
    db: Session = Depends(get_db_session),
    payment_provider: PaymentProvider = Depends(get_payment_provider),
) -> CheckoutService:
    return CheckoutService(db, payment_provider)


def get_bearer_token(request: Request) -> str:
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise InvalidCredentials("Missing Bearer token")
    return auth_header.split(" ", 1)[1].strip()
