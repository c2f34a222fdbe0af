"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    status_code = 400

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    status_code = 404

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class AuthenticationError(AppError):
    """Raised when a request carries no valid session token or bad credentials."""

    status_code = 401

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, code="UNAUTHORIZED")


class ForbiddenError(AppError):
    """Raised when an authenticated user touches another user's data."""

    status_code = 403

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message, code="FORBIDDEN")


class ConflictError(AppError):
    """Raised when a unique resource already exists."""

    status_code = 409

    def __init__(self, message: str):
        super().__init__(message, code="CONFLICT")


class ProviderError(AppError):
    """
    Raised when an upstream quote provider yields no usable price.

    Covers unsupported symbols or asset types, non-2xx responses, missing
    or non-positive prices and wrapped transport failures.
    """

    status_code = 502

    def __init__(self, message: str):
        super().__init__(message, code="PROVIDER_ERROR")


class ConfigurationError(AppError):
    """Raised when a provider credential required for a call is missing."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message, code="CONFIGURATION_ERROR")
