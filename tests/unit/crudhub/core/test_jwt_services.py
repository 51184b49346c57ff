"""Tests for session credential issuance and verification."""

import time

import pytest
from authlib.jose import jwt

from src.crudhub.core.errors import InvalidCredentials
from src.crudhub.core.services.jwt import JwtGeneratorService, JwtVerificationService
from tests.fixtures.core import TEST_SIGNING_SECRET


@pytest.fixture
def generator() -> JwtGeneratorService:
    return JwtGeneratorService()


@pytest.fixture
def verifier() -> JwtVerificationService:
    return JwtVerificationService()


def _encode(payload: dict, secret: str = TEST_SIGNING_SECRET) -> str:
    token = jwt.encode({"alg": "HS256", "typ": "JWT"}, payload, secret)
    return token.decode() if isinstance(token, bytes) else token


class TestSessionTokens:
    def test_generated_token_verifies(self, generator, verifier):
        issued = generator.generate_jwt("user-1", claims={"email": "a@example.com"})

        claims = verifier.verify_jwt(issued.access_token)

        assert issued.token_type == "Bearer"
        assert issued.expires_in == 3600
        assert claims.subject == "user-1"
        assert claims.email == "a@example.com"
        assert claims.expires_at - claims.issued_at == 3600
        assert claims.jti

    def test_registered_claims_cannot_be_overridden(self, generator, verifier):
        issued = generator.generate_jwt("user-1", claims={"sub": "someone-else"})
        assert verifier.verify_jwt(issued.access_token).subject == "user-1"

    def test_custom_lifetime(self, generator):
        issued = generator.generate_jwt("user-1", expires_in_seconds=60)
        assert issued.expires_in == 60

    def test_wrong_secret_is_rejected(self, generator, verifier):
        issued = generator.generate_jwt("user-1", secret="another-secret")
        with pytest.raises(InvalidCredentials):
            verifier.verify_jwt(issued.access_token)

    def test_expired_token_is_rejected(self, verifier):
        now = int(time.time())
        token = _encode(
            {
                "iss": "crudhub",
                "aud": "crudhub-api",
                "sub": "user-1",
                "iat": now - 7200,
                "exp": now - 3600,
            }
        )
        with pytest.raises(InvalidCredentials):
            verifier.verify_jwt(token)

    def test_wrong_audience_is_rejected(self, verifier):
        now = int(time.time())
        token = _encode(
            {
                "iss": "crudhub",
                "aud": "some-other-api",
                "sub": "user-1",
                "iat": now,
                "exp": now + 60,
            }
        )
        with pytest.raises(InvalidCredentials):
            verifier.verify_jwt(token)

    def test_garbage_is_rejected(self, verifier):
        with pytest.raises(InvalidCredentials):
            verifier.verify_jwt("not.a.jwt")

    def test_missing_secret_fails_loudly(self, generator, app_config):
        app_config.app.session_signing_secret = None
        with pytest.raises(RuntimeError):
            generator.generate_jwt("user-1")
