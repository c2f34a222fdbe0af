"""Cache models for quote lookups."""

from dataclasses import dataclass

from folio.domain.views.quote import Quote


@dataclass(frozen=True)
class CacheEntry:
    """
    Cached quote for one (asset class, symbol) key.

    expires_at is on the cache's own clock (monotonic seconds by default).
    """

    key: str
    quote: Quote
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at
