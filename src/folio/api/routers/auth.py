"""Auth API: register and login."""

from fastapi import APIRouter, Depends

from folio.api.deps import get_auth_service
from folio.api.schemas import AuthResponse, Credentials, UserOut
from folio.services import AuthResult, AuthService

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _to_response(result: AuthResult) -> AuthResponse:
    return AuthResponse(
        token=result.token,
        user=UserOut(id=result.user.user_id, email=result.user.email),
    )


@router.post("/register", response_model=AuthResponse, status_code=201)
def register(
    data: Credentials,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Register a new user; 409 when the email is taken."""
    return _to_response(auth_service.register(data.email, data.password))


@router.post("/login", response_model=AuthResponse)
def login(
    data: Credentials,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Exchange credentials for a session token."""
    return _to_response(auth_service.login(data.email, data.password))
