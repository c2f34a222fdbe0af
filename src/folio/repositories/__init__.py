"""Repository layer - data access abstractions and implementations."""

from folio.repositories.protocols import HoldingRepository, UserRepository

__all__ = [
    "HoldingRepository",
    "UserRepository",
]
