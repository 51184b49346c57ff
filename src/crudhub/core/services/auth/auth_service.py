from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from src.crudhub.core.errors import ConflictError, InvalidCredentials, ValidationError
from src.crudhub.core.security import hash_password, verify_password
from src.crudhub.core.services.jwt import (
    JwtGeneratorService,
    JwtVerificationService,
    SessionToken,
)
from src.crudhub.core.services.validation import require_fields
from src.crudhub.entities.core.user import Credentials, PublicUser, User, UserRepository
from src.crudhub.runtime.context import get_config


def normalize_email(email: str) -> str:
    return email.strip().lower()


class AuthService:
    """Registration, password login and session credential checks."""

    def __init__(
        self,
        db_session: Session,
        jwt_generator: JwtGeneratorService,
        jwt_verifier: JwtVerificationService,
    ):
        self._db_session = db_session
        self._user_repo = UserRepository(db_session)
        self._jwt_generator = jwt_generator
        self._jwt_verifier = jwt_verifier

    def register(self, credentials: Credentials) -> PublicUser:
        require_fields(email=credentials.email, password=credentials.password)
        email = normalize_email(credentials.email)
        if "@" not in email:
            raise ValidationError("email must contain '@'", {"fields": ["email"]})

        min_length = get_config().security.password_min_length
        if len(credentials.password) < min_length:
            raise ValidationError(
                f"password must be at least {min_length} characters",
                {"fields": ["password"]},
            )

        if self._user_repo.get_by_email(email) is not None:
            raise ConflictError(f"Email '{email}' is already registered", {"email": email})

        try:
            user = self._user_repo.create(
                User(email=email, password_hash=hash_password(credentials.password))
            )
            self._db_session.commit()
        except IntegrityError as e:
            # Lost a race against a concurrent registration of the same email
            self._db_session.rollback()
            raise ConflictError(
                f"Email '{email}' is already registered", {"email": email}
            ) from e

        logger.info("Registered user {}", user.id)
        return user.to_public()

    def login(self, credentials: Credentials) -> SessionToken:
        require_fields(email=credentials.email, password=credentials.password)
        user = self._user_repo.get_by_email(normalize_email(credentials.email))

        if user is None:
            # Spend the same hashing time as a wrong password would
            hash_password(credentials.password)
            raise InvalidCredentials()
        if not verify_password(credentials.password, user.password_hash):
            logger.info("Failed login for user {}", user.id)
            raise InvalidCredentials()

        logger.info("User {} logged in", user.id)
        return self._jwt_generator.generate_jwt(user.id, claims={"email": user.email})

    def current_user(self, token: str) -> PublicUser:
        """Resolve the user a session credential was issued to."""
        claims = self._jwt_verifier.verify_jwt(token)
        user = self._user_repo.get(claims.subject)
        if user is None:
            raise InvalidCredentials("Session refers to an unknown user")
        return user.to_public()
