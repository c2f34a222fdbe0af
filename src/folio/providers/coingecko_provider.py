"""
CoinGecko provider for crypto quotes, charts and coin search.

Only symbols on the curated allow-list are priced; anything else fails
before a request is made.
"""

import logging
from typing import Any, Optional

import httpx

from folio.config.settings import COINGECKO_PRO_URL
from folio.core.exceptions import ConfigurationError, ProviderError
from folio.core.timezone import from_timestamp_ms
from folio.domain.views import PriceHistory, PricePoint, Quote, SymbolMatch
from folio.providers.quote_provider import positive_price

logger = logging.getLogger(__name__)

SOURCE = "CoinGecko"

CRYPTO_IDS: dict[str, str] = {
    "BTC": "bitcoin",
    "ETH": "ethereum",
    "ADA": "cardano",
    "BNB": "binancecoin",
    "XRP": "ripple",
    "DOGE": "dogecoin",
    "SOL": "solana",
    "MATIC": "matic-network",
    "LTC": "litecoin",
}

# Yahoo-style chart ranges mapped onto market_chart "days"
_RANGE_DAYS = {
    "1d": "1",
    "5d": "5",
    "1mo": "30",
    "3mo": "90",
    "6mo": "180",
    "1y": "365",
    "5y": "1825",
    "max": "max",
}


class CoinGeckoQuoteProvider:
    """Crypto adapter over the CoinGecko v3 REST API."""

    name = SOURCE

    def __init__(
        self,
        client: httpx.Client,
        settlement_currency: str = "USD",
        base_url: str = "https://api.coingecko.com/api/v3",
        api_key: Optional[str] = None,
    ):
        self._client = client
        self._settlement_currency = settlement_currency.upper()
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key

    @staticmethod
    def coin_id(symbol: str) -> Optional[str]:
        """Return the CoinGecko id for a ticker, or None if not on the allow-list."""
        return CRYPTO_IDS.get(symbol.strip().upper())

    def fetch_quote(self, symbol: str) -> Quote:
        """Fetch the simple/price quote for an allow-listed ticker."""
        symbol = symbol.strip().upper()
        coin_id = require_coin_id(symbol)
        vs = self._settlement_currency.lower()

        data = self._get_json("/simple/price", {"ids": coin_id, "vs_currencies": vs})
        entry = data.get(coin_id) if isinstance(data, dict) else None
        price = positive_price(entry.get(vs) if isinstance(entry, dict) else None)
        if price is None:
            raise ProviderError(f"{SOURCE} error: price not found")

        return Quote(symbol=symbol, price=price, currency=self._settlement_currency, source=SOURCE)

    def fetch_history(self, symbol: str, range_: str, interval: str) -> PriceHistory:
        """
        Fetch market_chart prices for an allow-listed ticker.

        CoinGecko picks its own granularity from the day span, so interval
        is accepted for interface parity and otherwise ignored.
        """
        symbol = symbol.strip().upper()
        coin_id = require_coin_id(symbol)
        days = _RANGE_DAYS.get(range_, "30")

        data = self._get_json(
            f"/coins/{coin_id}/market_chart",
            {"vs_currency": self._settlement_currency.lower(), "days": days},
        )
        raw_points = data.get("prices") if isinstance(data, dict) else None
        if not isinstance(raw_points, list):
            raw_points = []
        points = []
        for row in raw_points:
            if not isinstance(row, (list, tuple)) or len(row) < 2 or not isinstance(row[0], (int, float)):
                continue
            price = positive_price(row[1])
            if price is None:
                continue
            points.append(PricePoint(time=from_timestamp_ms(row[0]), close=price))
        if not points:
            raise ProviderError(f"{SOURCE} error: no history for {symbol}")

        return PriceHistory(
            symbol=symbol,
            currency=self._settlement_currency,
            source=SOURCE,
            points=points,
        )

    def search(self, query: str) -> list[SymbolMatch]:
        """Search coins by name or ticker."""
        data = self._get_json("/search", {"query": query})
        coins = data.get("coins") if isinstance(data, dict) else None
        if not isinstance(coins, list):
            return []
        return [
            SymbolMatch(
                symbol=str(c["symbol"]).upper(),
                name=str(c.get("name") or ""),
                region="Crypto",
                currency=self._settlement_currency,
            )
            for c in coins
            if isinstance(c, dict) and c.get("symbol")
        ]

    def _headers(self) -> dict[str, str]:
        is_pro = self._base_url.startswith(COINGECKO_PRO_URL)
        if is_pro and not self._api_key:
            raise ConfigurationError("Missing CoinGecko API key for the pro endpoint")
        if not self._api_key:
            return {}
        header = "x-cg-pro-api-key" if is_pro else "x-cg-demo-api-key"
        return {header: self._api_key}

    def _get_json(self, path: str, params: dict[str, str]) -> Any:
        headers = self._headers()
        try:
            response = self._client.get(f"{self._base_url}{path}", params=params, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning("CoinGecko request to %s failed: %s", path, exc)
            raise ProviderError(f"{SOURCE} error: {exc}") from exc

        if not response.is_success:
            logger.warning("CoinGecko %s returned HTTP %s", path, response.status_code)
            raise ProviderError(f"{SOURCE} error: HTTP {response.status_code}")
        try:
            return response.json()
        except ValueError as exc:
            raise ProviderError(f"{SOURCE} error: invalid JSON response") from exc


def require_coin_id(symbol: str) -> str:
    """Return the CoinGecko id for an allow-listed ticker, else raise ProviderError."""
    coin_id = CoinGeckoQuoteProvider.coin_id(symbol)
    if not coin_id:
        raise ProviderError(f"{SOURCE} error: unsupported symbol: {symbol.strip().upper()}")
    return coin_id
