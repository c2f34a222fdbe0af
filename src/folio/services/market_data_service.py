"""Market data service: cached quote lookups."""

import logging
from typing import Union

from folio.domain.models import AssetClass
from folio.domain.views import Quote
from folio.services.quote_cache import QuoteCache
from folio.services.quote_resolver import QuoteResolver, parse_asset_class

logger = logging.getLogger(__name__)


class MarketDataService:
    """
    Service for fetching quotes through the cache.

    The cache is consulted strictly before the resolver and populated
    strictly after a successful resolution. Failures are never cached, so a
    failing symbol is retried upstream on every request.
    """

    def __init__(self, resolver: QuoteResolver, cache: QuoteCache):
        self._resolver = resolver
        self._cache = cache

    @property
    def cache(self) -> QuoteCache:
        return self._cache

    def get_quote(self, symbol: str, asset_class: Union[AssetClass, str]) -> Quote:
        """
        Return a quote for symbol, from cache when fresh.

        Raises ProviderError (or ConfigurationError) when no quote can be
        resolved.
        """
        asset_class = parse_asset_class(asset_class)
        symbol = symbol.strip().upper()

        cached = self._cache.get(asset_class, symbol)
        if cached is not None:
            logger.debug("Quote cache hit for %s:%s", asset_class.value, symbol)
            return cached

        logger.debug("Quote cache miss for %s:%s", asset_class.value, symbol)
        quote = self._resolver.resolve(symbol, asset_class)
        self._cache.put(asset_class, symbol, quote)
        return quote
