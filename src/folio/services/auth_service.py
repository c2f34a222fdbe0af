"""Auth service: registration, login and session tokens."""

import uuid
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

import bcrypt
from jose import JWTError, jwt

from folio.config.settings import Settings
from folio.core.exceptions import AuthenticationError, ConflictError, ValidationError
from folio.core.timezone import now_utc
from folio.domain.models import User
from folio.repositories.protocols import UserRepository


MIN_PASSWORD_LENGTH = 6
# bcrypt only looks at the first 72 bytes
MAX_PASSWORD_BYTES = 72


@dataclass
class AuthResult:
    """Token plus the user it was issued for."""

    token: str
    user: User


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


class AuthService:
    """Registers users and issues/verifies HS256 session tokens."""

    def __init__(self, user_repo: UserRepository, settings: Settings):
        self._user_repo = user_repo
        self._settings = settings

    def register(self, email: str, password: str) -> AuthResult:
        """Create a user and return a session token; duplicate emails conflict."""
        email = email.strip().lower()
        self._validate_password(password)
        if self._user_repo.get_by_email(email):
            raise ConflictError("Email already registered")

        user = self._user_repo.create(
            User(
                user_id=str(uuid.uuid4()),
                email=email,
                password_hash=hash_password(password),
                created_at=now_utc(),
            )
        )
        return AuthResult(token=self.issue_token(user), user=user)

    def login(self, email: str, password: str) -> AuthResult:
        """Check credentials and return a fresh session token."""
        user = self._user_repo.get_by_email(email.strip().lower())
        if not user or not verify_password(password, user.password_hash):
            raise AuthenticationError("Invalid credentials")
        return AuthResult(token=self.issue_token(user), user=user)

    def issue_token(self, user: User) -> str:
        now = now_utc()
        claims: dict[str, Any] = {
            "sub": user.user_id,
            "email": user.email,
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(days=self._settings.jwt_expire_days)).timestamp()),
        }
        return jwt.encode(claims, self._settings.jwt_secret, algorithm=self._settings.jwt_algorithm)

    def authenticate(self, token: str) -> str:
        """Verify a session token and return the owner id it carries."""
        try:
            payload = jwt.decode(
                token,
                self._settings.jwt_secret,
                algorithms=[self._settings.jwt_algorithm],
            )
        except JWTError:
            raise AuthenticationError("Invalid token") from None

        user_id = payload.get("sub")
        if not user_id:
            raise AuthenticationError("Invalid token")
        return user_id

    @staticmethod
    def _validate_password(password: str) -> None:
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
