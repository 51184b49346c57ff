"""Password authentication router."""

from fastapi import APIRouter, Depends

from src.crudhub.api.http.deps import get_auth_service, get_bearer_token
from src.crudhub.core.services import AuthService
from src.crudhub.core.services.jwt import SessionToken
from src.crudhub.entities.core.user import Credentials, PublicUser

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=PublicUser, status_code=201)
def register(
    credentials: Credentials,
    service: AuthService = Depends(get_auth_service),
) -> PublicUser:
    return service.register(credentials)


@router.post("/login", response_model=SessionToken)
def login(
    credentials: Credentials,
    service: AuthService = Depends(get_auth_service),
) -> SessionToken:
    """Exchange email and password for a session credential."""
    return service.login(credentials)


@router.get("/me", response_model=PublicUser)
def me(
    token: str = Depends(get_bearer_token),
    service: AuthService = Depends(get_auth_service),
) -> PublicUser:
    return service.current_user(token)
