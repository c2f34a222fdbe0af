"""Quote resolver: routes a symbol to the provider for its asset class."""

from typing import Union

from folio.core.exceptions import ProviderError
from folio.domain.models import AssetClass
from folio.domain.views import Quote
from folio.providers.quote_provider import QuoteProvider


class QuoteResolver:
    """
    Stateless dispatch from asset class to quote provider.

    Crypto goes to the crypto provider; equity, fund and commodity go to the
    equity provider. No caching happens here.
    """

    def __init__(self, equity_provider: QuoteProvider, crypto_provider: QuoteProvider):
        self._routes: dict[AssetClass, QuoteProvider] = {
            AssetClass.EQUITY: equity_provider,
            AssetClass.FUND: equity_provider,
            AssetClass.COMMODITY: equity_provider,
            AssetClass.CRYPTO: crypto_provider,
        }

    def provider_for(self, asset_class: Union[AssetClass, str]) -> QuoteProvider:
        """Return the provider for an asset class; unknown tags raise ProviderError."""
        return self._routes[parse_asset_class(asset_class)]

    def resolve(self, symbol: str, asset_class: Union[AssetClass, str]) -> Quote:
        """Fetch a quote from the provider owning the asset class."""
        return self.provider_for(asset_class).fetch_quote(symbol)


def parse_asset_class(asset_class: Union[AssetClass, str]) -> AssetClass:
    """Parse an asset-class tag, raising ProviderError for unsupported ones."""
    try:
        return AssetClass.from_tag(asset_class)
    except ValueError:
        raise ProviderError(f"Unsupported asset type: {asset_class}") from None
