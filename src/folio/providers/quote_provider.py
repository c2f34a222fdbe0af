"""Quote provider protocols and shared parsing helpers."""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Protocol

from folio.domain.views import PriceHistory, Quote, SymbolMatch


# Chart ranges accepted by the history endpoint (Yahoo Finance period names)
HISTORY_RANGES = ("1d", "5d", "1mo", "3mo", "6mo", "1y", "5y", "max")
HISTORY_INTERVALS = ("5m", "15m", "1h", "1d", "1wk", "1mo")


class QuoteProvider(Protocol):
    """
    Protocol for upstream quote sources.

    Implementations make at most one outbound request per call, never retry,
    and raise ProviderError (or ConfigurationError for a missing credential)
    instead of returning a quote without a positive price.
    """

    name: str

    def fetch_quote(self, symbol: str) -> Quote:
        """Fetch the latest price for a symbol."""
        ...


class HistoryProvider(Protocol):
    """Protocol for sources that can return a close-price chart series."""

    def fetch_history(self, symbol: str, range_: str, interval: str) -> PriceHistory:
        """Fetch closes for the given Yahoo-style range and interval."""
        ...


class SymbolSearchProvider(Protocol):
    """Protocol for upstream symbol search."""

    def search(self, query: str) -> list[SymbolMatch]:
        """Return symbols matching a free-form query."""
        ...


def positive_price(value: Any) -> Optional[Decimal]:
    """Coerce an upstream price field to a positive Decimal, or None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        price = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    if not price.is_finite() or price <= 0:
        return None
    return price
