import time
from typing import Any

from authlib.common.security import generate_token
from authlib.jose import JoseError, jwt
from loguru import logger
from pydantic import BaseModel

from src.crudhub.runtime.context import get_config

_REGISTERED_CLAIMS = {"iss", "sub", "aud", "exp", "iat", "nbf", "jti"}


class SessionToken(BaseModel):
    """Opaque session credential handed to the client after login."""

    access_token: str
    token_type: str = "Bearer"
    expires_in: int


def signing_secret() -> str:
    secret = get_config().app.session_signing_secret
    if not secret:
        raise RuntimeError("Session signing secret not configured")
    return secret


class JwtGeneratorService:
    """Issues signed session credentials."""

    def generate_jwt(
        self,
        subject: str,
        claims: dict[str, Any] | None = None,
        expires_in_seconds: int | None = None,
        secret: str | None = None,
    ) -> SessionToken:
        """Generate a signed session token for ``subject``.

        Args:
            subject: Subject (sub) claim, the user id
            claims: Additional non-registered claims to include
            expires_in_seconds: Token lifetime (defaults to ``app.session_max_age``)
            secret: Signing secret (defaults to ``app.session_signing_secret``)

        Returns:
            The encoded token with its lifetime
        """
        config = get_config()
        lifetime = expires_in_seconds or config.app.session_max_age
        now = int(time.time())

        payload: dict[str, Any] = {
            "iss": config.jwt.issuer,
            "sub": subject,
            "aud": config.jwt.audience,
            "iat": now,
            "nbf": now,
            "exp": now + lifetime,
            "jti": generate_token(16),
        }
        if claims:
            payload.update(
                {k: v for k, v in claims.items() if k not in _REGISTERED_CLAIMS}
            )

        header = {"alg": config.jwt.algorithm, "typ": "JWT"}
        try:
            token = jwt.encode(header, payload, secret or signing_secret())
        except JoseError as e:
            logger.error("JWT encoding failed: {}", e)
            raise

        if isinstance(token, bytes):
            token = token.decode()
        return SessionToken(access_token=token, expires_in=lifetime)
