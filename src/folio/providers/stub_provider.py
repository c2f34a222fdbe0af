"""Stub quote provider for offline/testing use."""

from datetime import timedelta
from decimal import Decimal
from typing import Callable, Optional

from folio.core.exceptions import ProviderError
from folio.core.timezone import now_utc
from folio.domain.views import PriceHistory, PricePoint, Quote, SymbolMatch


SOURCE = "Stub"

# Deterministic fake prices for common symbols
STUB_EQUITY_PRICES: dict[str, Decimal] = {
    "AAPL": Decimal("185.50"),
    "MSFT": Decimal("378.25"),
    "GOOGL": Decimal("142.75"),
    "VFIAX": Decimal("455.10"),
    "SPY": Decimal("485.25"),
    "GC=F": Decimal("2035.40"),
}

# Crypto tickers are limited to the CoinGecko allow-list
STUB_CRYPTO_PRICES: dict[str, Decimal] = {
    "BTC": Decimal("30000"),
    "ETH": Decimal("1800"),
    "SOL": Decimal("95.20"),
}

_RANGE_POINTS = {"1d": 1, "5d": 5, "1mo": 30, "3mo": 90, "6mo": 180, "1y": 365}


class StubQuoteProvider:
    """
    Stub provider with deterministic fake data for offline operation.

    Serves quotes, flat chart series and search from a fixed price table;
    unknown symbols fail the same way a live provider would.
    """

    name = SOURCE

    def __init__(
        self,
        settlement_currency: str = "USD",
        prices: Optional[dict[str, Decimal]] = None,
        symbol_check: Optional[Callable[[str], object]] = None,
    ):
        self._currency = settlement_currency.upper()
        if prices is None:
            prices = {**STUB_EQUITY_PRICES, **STUB_CRYPTO_PRICES}
        self._prices = dict(prices)
        # Raises for symbols the live provider would refuse before any lookup
        self._symbol_check = symbol_check

    def fetch_quote(self, symbol: str) -> Quote:
        """Return the table price for a symbol."""
        symbol = symbol.strip().upper()
        if self._symbol_check is not None:
            self._symbol_check(symbol)
        price = self._prices.get(symbol)
        if price is None:
            raise ProviderError(f"{SOURCE} error: price not found")
        return Quote(symbol=symbol, price=price, currency=self._currency, source=SOURCE)

    def fetch_history(self, symbol: str, range_: str, interval: str) -> PriceHistory:
        """Return one flat daily close per day of the range."""
        quote = self.fetch_quote(symbol)
        days = _RANGE_POINTS.get(range_, 30)
        today = now_utc().replace(hour=0, minute=0, second=0, microsecond=0)
        points = [
            PricePoint(time=today - timedelta(days=offset), close=quote.price)
            for offset in range(days - 1, -1, -1)
        ]
        return PriceHistory(symbol=quote.symbol, currency=self._currency, source=SOURCE, points=points)

    def search(self, query: str) -> list[SymbolMatch]:
        """Prefix match over the price table."""
        needle = query.strip().upper()
        return [
            SymbolMatch(symbol=symbol, name=symbol, region="Stub", currency=self._currency)
            for symbol in sorted(self._prices)
            if symbol.startswith(needle)
        ]
