"""Repository protocol definitions (interfaces)."""

from folio.repositories.protocols.holding_repo import HoldingRepository
from folio.repositories.protocols.user_repo import UserRepository

__all__ = [
    "HoldingRepository",
    "UserRepository",
]
