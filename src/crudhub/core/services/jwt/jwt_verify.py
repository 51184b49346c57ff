"""Session credential verification."""

from authlib.jose import JoseError, jwt
from loguru import logger
from pydantic import BaseModel

from src.crudhub.core.errors import InvalidCredentials
from src.crudhub.core.services.jwt.jwt_gen import signing_secret
from src.crudhub.runtime.context import get_config


class SessionClaims(BaseModel):
    subject: str
    email: str | None = None
    issued_at: int
    expires_at: int
    jti: str | None = None


class JwtVerificationService:
    def verify_jwt(self, token: str, *, secret: str | None = None) -> SessionClaims:
        """Verify signature, issuer, audience and lifetime of a session token.

        Raises:
            InvalidCredentials: if the token is malformed, forged or expired
        """
        cfg = get_config()
        claims_options = {
            "iss": {"essential": True, "value": cfg.jwt.issuer},
            "aud": {"essential": True, "value": cfg.jwt.audience},
            "sub": {"essential": True},
            "exp": {"essential": True},
            "iat": {"essential": True},
        }

        try:
            claims = jwt.decode(
                token, secret or signing_secret(), claims_options=claims_options
            )
            claims.validate(leeway=cfg.jwt.clock_skew)
        except (JoseError, ValueError) as exc:
            logger.debug("Rejected session token: {}", exc)
            raise InvalidCredentials("Invalid or expired session token") from exc

        if claims.header.get("alg") != cfg.jwt.algorithm:
            raise InvalidCredentials("Disallowed JWT algorithm")

        return SessionClaims(
            subject=claims["sub"],
            email=claims.get("email"),
            issued_at=claims["iat"],
            expires_at=claims["exp"],
            jti=claims.get("jti"),
        )
