"""Quote providers: one adapter per upstream price source."""

from folio.providers.quote_provider import (
    QuoteProvider,
    HistoryProvider,
    SymbolSearchProvider,
    HISTORY_RANGES,
    HISTORY_INTERVALS,
)
from folio.providers.yahoo_provider import YahooQuoteProvider
from folio.providers.coingecko_provider import CoinGeckoQuoteProvider, CRYPTO_IDS
from folio.providers.alpha_vantage_provider import AlphaVantageSearchProvider
from folio.providers.stub_provider import StubQuoteProvider

__all__ = [
    "QuoteProvider",
    "HistoryProvider",
    "SymbolSearchProvider",
    "HISTORY_RANGES",
    "HISTORY_INTERVALS",
    "YahooQuoteProvider",
    "CoinGeckoQuoteProvider",
    "CRYPTO_IDS",
    "AlphaVantageSearchProvider",
    "StubQuoteProvider",
]
