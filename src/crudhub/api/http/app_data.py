from dataclasses import dataclass

from src.crudhub.core.services import (
    DbSessionService,
    JwtGeneratorService,
    JwtVerificationService,
    PaymentProvider,
)


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    jwt_generation_service: JwtGeneratorService
    jwt_verify_service: JwtVerificationService
    payment_provider: PaymentProvider
