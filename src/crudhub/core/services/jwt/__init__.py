from .jwt_gen import JwtGeneratorService, SessionToken
from .jwt_verify import JwtVerificationService, SessionClaims

__all__ = [
    "JwtGeneratorService",
    "JwtVerificationService",
    "SessionClaims",
    "SessionToken",
]
