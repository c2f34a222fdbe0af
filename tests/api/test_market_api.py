"""
API tests for quote, search, history and health endpoints.
"""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from folio.main import app
from folio.api.deps import get_history_service, get_market_data_service, get_search_service
from folio.core.exceptions import ConfigurationError
from folio.core.timezone import UTC
from folio.domain.views import PriceHistory, PricePoint, SymbolMatch
from folio.services import MarketDataService, QuoteCache, QuoteResolver

from tests.conftest import FakeClock


@pytest.fixture
def search_service(client) -> MagicMock:
    service = MagicMock()
    app.dependency_overrides[get_search_service] = lambda: service
    return service


@pytest.fixture
def history_service(client) -> MagicMock:
    service = MagicMock()
    app.dependency_overrides[get_history_service] = lambda: service
    return service


@pytest.fixture
def unconfigured_crypto(client, equity_provider) -> MagicMock:
    """Crypto provider that fails for want of an API key, wired into the app."""
    crypto = MagicMock()
    crypto.fetch_quote.side_effect = ConfigurationError("Missing CoinGecko API key for the pro endpoint")
    service = MarketDataService(
        resolver=QuoteResolver(equity_provider=equity_provider, crypto_provider=crypto),
        cache=QuoteCache(clock=FakeClock()),
    )
    app.dependency_overrides[get_market_data_service] = lambda: service
    return crypto

class TestQuoteEndpoint:
    """Tests for GET /api/portfolio/quote/{asset_type}/{symbol}."""

    def test_quote_returns_normalized_quote(self, client: TestClient, user):
        response = client.get("/api/portfolio/quote/crypto/btc", headers=user["headers"])

        assert response.status_code == 200
        assert response.json() == {
            "symbol": "BTC",
            "price": 30000.0,
            "currency": "USD",
            "source": "CoinGecko",
        }

    def test_legacy_asset_type_in_path(self, client: TestClient, user):
        response = client.get("/api/portfolio/quote/stock/MSFT", headers=user["headers"])

        assert response.status_code == 200
        assert response.json()["price"] == 378.25

    def test_provider_failure_surfaces_message(self, client: TestClient, user):
        """
        GIVEN a symbol no provider can price
        WHEN I GET its quote
        THEN 502 with the provider's message
        """
        response = client.get("/api/portfolio/quote/equity/NOPE", headers=user["headers"])

        assert response.status_code == 502
        assert response.json() == {
            "error": "PROVIDER_ERROR",
            "message": "Yahoo Finance error: price not found",
        }

    def test_unsupported_asset_type(self, client: TestClient, user, equity_provider, crypto_provider):
        response = client.get("/api/portfolio/quote/bond/US10Y", headers=user["headers"])

        assert response.status_code == 502
        assert response.json()["message"] == "Unsupported asset type: bond"
        assert equity_provider.calls == []
        assert crypto_provider.calls == []

    def test_second_request_served_from_cache(self, client: TestClient, user, crypto_provider):
        client.get("/api/portfolio/quote/crypto/ETH", headers=user["headers"])
        client.get("/api/portfolio/quote/crypto/eth", headers=user["headers"])

        assert crypto_provider.calls == ["ETH"]

    def test_configuration_error_returns_500(self, client: TestClient, user, unconfigured_crypto):
        """
        GIVEN the crypto provider is missing its API key
        WHEN I GET a crypto quote
        THEN 500 with the configuration error code and message
        """
        response = client.get("/api/portfolio/quote/crypto/BTC", headers=user["headers"])

        assert response.status_code == 500
        assert response.json() == {
            "error": "CONFIGURATION_ERROR",
            "message": "Missing CoinGecko API key for the pro endpoint",
        }

    def test_configuration_error_is_error_row_in_portfolio(self, client: TestClient, user, unconfigured_crypto):
        for symbol, asset_class in [("AAPL", "equity"), ("BTC", "crypto")]:
            response = client.post(
                "/api/portfolio/add",
                json={"symbol": symbol, "assetClass": asset_class, "quantity": 1, "buyPrice": 100},
                headers=user["headers"],
            )
            assert response.status_code == 201, response.text

        response = client.get(f"/api/portfolio/{user['id']}", headers=user["headers"])

        assert response.status_code == 200
        rows = {a["symbol"]: a for a in response.json()["assets"]}
        assert "error" not in rows["AAPL"]
        assert rows["BTC"]["error"] == "Missing CoinGecko API key for the pro endpoint"
        assert rows["BTC"]["currentPrice"] is None


class TestSearchEndpoint:
    """Tests for GET /api/portfolio/search."""

    def test_search_defaults_to_equities(self, client: TestClient, search_service):
        search_service.search.return_value = [
            SymbolMatch(symbol="AAPL", name="Apple Inc.", region="United States", currency="USD"),
        ]

        response = client.get("/api/portfolio/search", params={"q": "apple"})

        assert response.status_code == 200
        assert response.json() == [
            {"symbol": "AAPL", "name": "Apple Inc.", "region": "United States", "currency": "USD"},
        ]
        search_service.search.assert_called_once_with("apple", "stock")

    def test_search_crypto_type(self, client: TestClient, search_service):
        search_service.search.return_value = []

        client.get("/api/portfolio/search", params={"q": "bit", "type": "crypto"})

        search_service.search.assert_called_once_with("bit", "crypto")

    def test_search_missing_key_returns_500(self, client: TestClient, search_service):
        search_service.search.side_effect = ConfigurationError("Missing Alpha Vantage API key")

        response = client.get("/api/portfolio/search", params={"q": "apple"})

        assert response.status_code == 500
        assert response.json()["message"] == "Missing Alpha Vantage API key"

    def test_search_without_query_returns_400(self, client: TestClient):
        response = client.get("/api/portfolio/search")

        assert response.status_code == 400
        assert response.json() == {"error": "VALIDATION_ERROR", "message": "Missing query"}


class TestHistoryEndpoint:
    """Tests for GET /api/portfolio/history/{symbol}."""

    def test_history_passes_query_params(self, client: TestClient, user, history_service):
        history_service.get_history.return_value = PriceHistory(
            symbol="BTC",
            currency="USD",
            source="CoinGecko",
            points=[PricePoint(time=datetime(2024, 1, 2, tzinfo=UTC), close=Decimal("42000.5"))],
        )

        response = client.get(
            "/api/portfolio/history/btc",
            params={"type": "crypto", "range": "1y", "interval": "1d"},
            headers=user["headers"],
        )

        assert response.status_code == 200
        body = response.json()
        assert body["symbol"] == "BTC"
        assert body["points"][0]["close"] == 42000.5
        assert body["points"][0]["time"].startswith("2024-01-02T00:00:00")
        history_service.get_history.assert_called_once_with("btc", "crypto", "1y", "1d")

    def test_history_defaults(self, client: TestClient, user, history_service):
        history_service.get_history.return_value = PriceHistory(
            symbol="AAPL", currency="USD", source="Stub", points=[],
        )

        client.get("/api/portfolio/history/AAPL", headers=user["headers"])

        history_service.get_history.assert_called_once_with("AAPL", "equity", "1mo", "1d")

    def test_history_invalid_range_returns_400(self, client: TestClient, user):
        response = client.get(
            "/api/portfolio/history/AAPL",
            params={"range": "2w"},
            headers=user["headers"],
        )

        assert response.status_code == 400

    def test_history_requires_token(self, client: TestClient):
        response = client.get("/api/portfolio/history/AAPL")

        assert response.status_code == 401


class TestHealth:
    """Tests for GET /api/health."""

    def test_health(self, client: TestClient):
        response = client.get("/api/health")

        assert response.status_code == 200
        body = response.json()
        assert body["ok"] is True
        assert isinstance(body["cached_quotes"], int)
