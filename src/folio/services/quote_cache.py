"""In-memory quote cache with per-asset-class lifetimes."""

import logging
import time
from typing import Callable, Optional

from folio.domain.models import AssetClass, CacheEntry
from folio.domain.views import Quote

logger = logging.getLogger(__name__)

DEFAULT_EQUITY_TTL_SECONDS = 900
DEFAULT_CRYPTO_TTL_SECONDS = 60


class QuoteCache:
    """
    Process-wide quote cache keyed by "ASSETCLASS:SYMBOL".

    Entries expire lazily: a read at or past expires_at is a miss, and the
    entry is overwritten by the next successful resolution. Nothing purges
    entries in the background, so the map grows with the number of distinct
    keys ever queried. get and put are single dict operations; concurrent
    writers to one key resolve last-write-wins.
    """

    def __init__(
        self,
        equity_ttl_seconds: float = DEFAULT_EQUITY_TTL_SECONDS,
        crypto_ttl_seconds: float = DEFAULT_CRYPTO_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._equity_ttl = equity_ttl_seconds
        self._crypto_ttl = crypto_ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    @staticmethod
    def make_key(asset_class: AssetClass, symbol: str) -> str:
        return f"{asset_class.value}:{symbol.strip()}".upper()

    def ttl_for(self, asset_class: AssetClass) -> float:
        """Lifetime in seconds for quotes of this asset class."""
        return self._crypto_ttl if asset_class.is_crypto else self._equity_ttl

    def get(self, asset_class: AssetClass, symbol: str) -> Optional[Quote]:
        """Return the cached quote, or None when absent or expired."""
        key = self.make_key(asset_class, symbol)
        entry = self._entries.get(key)
        if entry is None or entry.is_expired(self._clock()):
            return None
        return entry.quote

    def put(self, asset_class: AssetClass, symbol: str, quote: Quote) -> None:
        """Store a quote until now + ttl_for(asset_class)."""
        key = self.make_key(asset_class, symbol)
        self._entries[key] = CacheEntry(
            key=key,
            quote=quote,
            expires_at=self._clock() + self.ttl_for(asset_class),
        )

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
