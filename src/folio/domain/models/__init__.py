"""Domain models package."""

from folio.domain.models.enums import AssetClass
from folio.domain.models.holding import Holding
from folio.domain.models.user import User
from folio.domain.models.cache import CacheEntry

__all__ = [
    "AssetClass",
    "Holding",
    "User",
    "CacheEntry",
]
