"""Unit tests for QuoteResolver dispatch."""

from decimal import Decimal

import pytest

from folio.core.exceptions import ProviderError
from folio.domain.models import AssetClass
from folio.services import QuoteResolver

from tests.conftest import RecordingProvider


class TestResolverDispatch:
    """Asset class picks the provider."""

    def test_crypto_routes_to_crypto_provider(self, resolver, equity_provider, crypto_provider):
        quote = resolver.resolve("BTC", AssetClass.CRYPTO)

        assert quote.price == Decimal("30000")
        assert crypto_provider.calls == ["BTC"]
        assert equity_provider.calls == []

    @pytest.mark.parametrize("asset_class", ["equity", "fund", "commodity", "stock", "mutual_fund"])
    def test_non_crypto_routes_to_equity_provider(
        self,
        resolver,
        equity_provider,
        crypto_provider,
        asset_class,
    ):
        resolver.resolve("AAPL", asset_class)

        assert equity_provider.calls == ["AAPL"]
        assert crypto_provider.calls == []

    def test_unsupported_asset_class_fails_without_calling_providers(
        self,
        resolver,
        equity_provider,
        crypto_provider,
    ):
        """
        GIVEN an asset class tag "bond"
        WHEN I resolve a quote
        THEN ProviderError is raised and neither provider is called
        """
        with pytest.raises(ProviderError, match="Unsupported asset type"):
            resolver.resolve("US10Y", "bond")

        assert equity_provider.calls == []
        assert crypto_provider.calls == []

    def test_provider_error_propagates(self, resolver):
        with pytest.raises(ProviderError, match="price not found"):
            resolver.resolve("NOPE", AssetClass.EQUITY)

    def test_resolver_does_not_cache(self, resolver, equity_provider):
        resolver.resolve("AAPL", AssetClass.EQUITY)
        resolver.resolve("AAPL", AssetClass.EQUITY)

        assert equity_provider.calls == ["AAPL", "AAPL"]

    def test_provider_for_returns_shared_equity_adapter(self):
        equity = RecordingProvider("Equity", {})
        crypto = RecordingProvider("Crypto", {})
        resolver = QuoteResolver(equity_provider=equity, crypto_provider=crypto)

        assert resolver.provider_for(AssetClass.FUND) is equity
        assert resolver.provider_for(AssetClass.COMMODITY) is equity
        assert resolver.provider_for(AssetClass.CRYPTO) is crypto
