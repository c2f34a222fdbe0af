"""Alpha Vantage SYMBOL_SEARCH passthrough for equities and funds."""

import logging
from typing import Optional

import httpx

from folio.core.exceptions import ConfigurationError, ProviderError
from folio.domain.views import SymbolMatch

logger = logging.getLogger(__name__)

SOURCE = "Alpha Vantage"


class AlphaVantageSearchProvider:
    """Symbol search backed by Alpha Vantage; requires an API key."""

    def __init__(
        self,
        client: httpx.Client,
        api_key: Optional[str],
        base_url: str = "https://www.alphavantage.co/query",
    ):
        self._client = client
        self._api_key = api_key
        self._base_url = base_url

    def search(self, query: str) -> list[SymbolMatch]:
        """Return bestMatches for the keywords."""
        if not self._api_key:
            raise ConfigurationError("Missing Alpha Vantage API key")

        params = {"function": "SYMBOL_SEARCH", "keywords": query, "apikey": self._api_key}
        try:
            response = self._client.get(self._base_url, params=params)
        except httpx.HTTPError as exc:
            logger.warning("Alpha Vantage search failed: %s", exc)
            raise ProviderError(f"{SOURCE} error: {exc}") from exc
        if not response.is_success:
            raise ProviderError(f"{SOURCE} error: HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError as exc:
            raise ProviderError(f"{SOURCE} error: invalid JSON response") from exc

        matches = data.get("bestMatches") if isinstance(data, dict) else None
        if not isinstance(matches, list):
            return []
        return [
            SymbolMatch(
                symbol=m.get("1. symbol", ""),
                name=m.get("2. name", ""),
                region=m.get("4. region"),
                currency=m.get("8. currency"),
            )
            for m in matches
            if isinstance(m, dict) and m.get("1. symbol")
        ]
