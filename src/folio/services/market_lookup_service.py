"""Symbol search and price history passthroughs."""

from typing import Union

from folio.core.exceptions import ValidationError
from folio.domain.models import AssetClass
from folio.domain.views import PriceHistory, SymbolMatch
from folio.providers.quote_provider import (
    HISTORY_INTERVALS,
    HISTORY_RANGES,
    HistoryProvider,
    SymbolSearchProvider,
)
from folio.services.quote_resolver import parse_asset_class


DEFAULT_HISTORY_RANGE = "1mo"
DEFAULT_HISTORY_INTERVAL = "1d"


class SearchService:
    """Routes symbol search to the crypto or the equity search provider."""

    def __init__(self, equity_search: SymbolSearchProvider, crypto_search: SymbolSearchProvider):
        self._equity_search = equity_search
        self._crypto_search = crypto_search

    def search(self, query: str, search_type: str = "stock") -> list[SymbolMatch]:
        query = (query or "").strip()
        if not query:
            raise ValidationError("Missing query")
        if (search_type or "").strip().lower() == AssetClass.CRYPTO.value:
            return self._crypto_search.search(query)
        return self._equity_search.search(query)


class HistoryService:
    """
    Chart series for a single symbol.

    Uses the same asset-class routing as quotes. Nothing is cached or
    persisted; every call is one upstream request.
    """

    def __init__(self, equity_history: HistoryProvider, crypto_history: HistoryProvider):
        self._equity_history = equity_history
        self._crypto_history = crypto_history

    def get_history(
        self,
        symbol: str,
        asset_class: Union[AssetClass, str],
        range_: str = DEFAULT_HISTORY_RANGE,
        interval: str = DEFAULT_HISTORY_INTERVAL,
    ) -> PriceHistory:
        symbol = (symbol or "").strip().upper()
        if not symbol:
            raise ValidationError("Symbol is required")
        if range_ not in HISTORY_RANGES:
            raise ValidationError(f"Range must be one of: {', '.join(HISTORY_RANGES)}")
        if interval not in HISTORY_INTERVALS:
            raise ValidationError(f"Interval must be one of: {', '.join(HISTORY_INTERVALS)}")

        asset_class = parse_asset_class(asset_class)
        provider = self._crypto_history if asset_class.is_crypto else self._equity_history
        return provider.fetch_history(symbol, range_, interval)
