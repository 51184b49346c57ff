"""Password hashing and opaque token helpers."""

import base64
import hashlib
import hmac
import secrets

from src.crudhub.runtime.context import get_config

_SCHEME = "pbkdf2_sha256"


def generate_secure_token(length: int = 32) -> str:
    """Generate a cryptographically secure random token.

    Args:
        length: Number of random bytes to generate (default 32)

    Returns:
        URL-safe base64 encoded token
    """
    return (
        base64.urlsafe_b64encode(secrets.token_bytes(length))
        .decode("utf-8")
        .rstrip("=")
    )


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def hash_password(password: str, *, iterations: int | None = None) -> str:
    """Hash a password with a random salt.

    The result is self-describing: ``pbkdf2_sha256$<iterations>$<salt>$<hash>``
    so the iteration count can be raised without invalidating stored hashes.
    """
    security = get_config().security
    iterations = iterations or security.pbkdf2_iterations
    salt = secrets.token_bytes(security.salt_bytes)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return f"{_SCHEME}${iterations}${_b64(salt)}${_b64(digest)}"


def verify_password(password: str, encoded: str) -> bool:
    """Check ``password`` against a value produced by :func:`hash_password`."""
    try:
        scheme, iterations, salt_b64, digest_b64 = encoded.split("$", 3)
        if scheme != _SCHEME:
            return False
        salt = base64.b64decode(salt_b64)
        expected = base64.b64decode(digest_b64)
        rounds = int(iterations)
    except ValueError:
        return False

    candidate = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, rounds)
    # Constant-time comparison
    return hmac.compare_digest(candidate, expected)
