"""Core utilities and shared functionality."""

from folio.core.timezone import now_utc, to_utc, from_timestamp_ms, UTC
from folio.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    AuthenticationError,
    ForbiddenError,
    ConflictError,
    ProviderError,
    ConfigurationError,
)

__all__ = [
    "now_utc",
    "to_utc",
    "from_timestamp_ms",
    "UTC",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "AuthenticationError",
    "ForbiddenError",
    "ConflictError",
    "ProviderError",
    "ConfigurationError",
]
