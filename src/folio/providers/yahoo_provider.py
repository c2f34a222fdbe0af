"""
Yahoo Finance provider via yfinance.

Prices equities, mutual funds and commodity futures (e.g. GC=F for gold)
from the ticker's quote info, and supplies chart history.
"""

import logging

from folio.core.exceptions import ProviderError
from folio.core.timezone import to_utc
from folio.domain.views import PriceHistory, PricePoint, Quote
from folio.providers.quote_provider import positive_price

logger = logging.getLogger(__name__)

SOURCE = "Yahoo Finance"


# Lazy import so tests can patch before import
def _get_yf():
    import yfinance as yf
    return yf


class YahooQuoteProvider:
    """Quote and history adapter backed by yfinance."""

    name = SOURCE

    def __init__(self, settlement_currency: str = "USD"):
        self._settlement_currency = settlement_currency.upper()

    def fetch_quote(self, symbol: str) -> Quote:
        """
        Fetch regularMarketPrice for a ticker.

        Missing or non-positive prices and any yfinance failure surface as
        ProviderError with the provider name in the message.
        """
        symbol = symbol.strip().upper()
        try:
            info = _get_yf().Ticker(symbol).info
        except Exception as exc:
            logger.warning("Yahoo Finance quote failed for %s: %s", symbol, exc)
            raise ProviderError(f"{SOURCE} error: {exc}") from exc

        if not isinstance(info, dict):
            raise ProviderError(f"{SOURCE} error: price not found")
        price = positive_price(info.get("regularMarketPrice"))
        if price is None:
            raise ProviderError(f"{SOURCE} error: price not found")

        currency = (info.get("currency") or self._settlement_currency).upper()
        return Quote(symbol=symbol, price=price, currency=currency, source=SOURCE)

    def fetch_history(self, symbol: str, range_: str, interval: str) -> PriceHistory:
        """Fetch closes for a Yahoo period (e.g. "1mo") at the given interval."""
        symbol = symbol.strip().upper()
        try:
            ticker = _get_yf().Ticker(symbol)
            frame = ticker.history(period=range_, interval=interval, auto_adjust=False)
        except Exception as exc:
            logger.warning("Yahoo Finance history failed for %s: %s", symbol, exc)
            raise ProviderError(f"{SOURCE} error: {exc}") from exc

        if frame is None or frame.empty or "Close" not in frame:
            raise ProviderError(f"{SOURCE} error: no history for {symbol}")

        points = []
        for ts, close in frame["Close"].items():
            price = positive_price(close)
            if price is None:
                continue
            points.append(PricePoint(time=to_utc(ts.to_pydatetime()), close=price))
        if not points:
            raise ProviderError(f"{SOURCE} error: no history for {symbol}")

        currency = self._history_currency(ticker)
        return PriceHistory(symbol=symbol, currency=currency, source=SOURCE, points=points)

    def _history_currency(self, ticker) -> str:
        try:
            currency = ticker.history_metadata.get("currency")
        except Exception:
            currency = None
        return (currency or self._settlement_currency).upper()
