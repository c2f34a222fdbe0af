"""
Pytest configuration and fixtures for the portfolio tracker tests.

This module provides:
- In-memory SQLite database fixtures
- Recording quote providers with call counters
- A controllable clock for cache expiry
- Service and repository fixtures
- An authenticated API test client
"""

import os

# Keep the app offline and off disk before anything reads settings
os.environ.setdefault("QUOTE_PROVIDER", "stub")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret")

import uuid
from decimal import Decimal
from typing import Callable, Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from folio.main import app
from folio.api.deps import close_market_stack, get_market_data_service
from folio.config.settings import Settings, reset_settings
from folio.core.exceptions import ProviderError
from folio.domain.models import AssetClass, Holding
from folio.domain.views import Quote
from folio.repositories.sqlalchemy.database import Base, get_db
# Import ORM models to register them with Base before creating tables
from folio.repositories.sqlalchemy import orm_models  # noqa: F401
from folio.repositories.sqlalchemy import (
    SqlAlchemyHoldingRepository,
    SqlAlchemyUserRepository,
)
from folio.services import (
    AuthService,
    HoldingService,
    MarketDataService,
    PortfolioEngine,
    QuoteCache,
    QuoteResolver,
)


# =============================================================================
# CLOCK AND PROVIDER DOUBLES
# =============================================================================


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingProvider:
    """
    Deterministic quote provider that records every fetch.

    Symbols missing from the price table fail like a live provider.
    """

    def __init__(self, name: str, prices: dict[str, Decimal], currency: str = "USD"):
        self.name = name
        self.prices = dict(prices)
        self.currency = currency
        self.calls: list[str] = []

    def fetch_quote(self, symbol: str) -> Quote:
        self.calls.append(symbol)
        price = self.prices.get(symbol.upper())
        if price is None:
            raise ProviderError(f"{self.name} error: price not found")
        return Quote(symbol=symbol.upper(), price=price, currency=self.currency, source=self.name)


EQUITY_PRICES = {
    "AAPL": Decimal("185.50"),
    "MSFT": Decimal("378.25"),
    "VFIAX": Decimal("455.10"),
    "GC=F": Decimal("2035.40"),
}

CRYPTO_PRICES = {
    "BTC": Decimal("30000"),
    "ETH": Decimal("1800"),
}


def make_holding(
    symbol: str,
    asset_class: AssetClass = AssetClass.EQUITY,
    quantity: Decimal = Decimal("1"),
    buy_price: Decimal = Decimal("100"),
    owner_id: str = "owner-1",
    holding_id: Optional[str] = None,
) -> Holding:
    """Build an in-memory Holding."""
    return Holding(
        holding_id=holding_id or str(uuid.uuid4()),
        owner_id=owner_id,
        symbol=symbol,
        asset_class=asset_class,
        quantity=quantity,
        buy_price=buy_price,
    )


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def equity_provider() -> RecordingProvider:
    return RecordingProvider("Yahoo Finance", EQUITY_PRICES)


@pytest.fixture
def crypto_provider() -> RecordingProvider:
    return RecordingProvider("CoinGecko", CRYPTO_PRICES)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    # Reset settings for clean state
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def user_repo(test_session) -> SqlAlchemyUserRepository:
    """Provide test UserRepository."""
    return SqlAlchemyUserRepository(test_session)


@pytest.fixture
def holding_repo(test_session) -> SqlAlchemyHoldingRepository:
    """Provide test HoldingRepository."""
    return SqlAlchemyHoldingRepository(test_session)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def quote_cache(fake_clock) -> QuoteCache:
    """Provide a QuoteCache on the fake clock (900s equity, 60s crypto)."""
    return QuoteCache(equity_ttl_seconds=900, crypto_ttl_seconds=60, clock=fake_clock)


@pytest.fixture
def resolver(equity_provider, crypto_provider) -> QuoteResolver:
    return QuoteResolver(equity_provider=equity_provider, crypto_provider=crypto_provider)


@pytest.fixture
def market_data_service(resolver, quote_cache) -> MarketDataService:
    return MarketDataService(resolver=resolver, cache=quote_cache)


@pytest.fixture
def portfolio_engine(market_data_service) -> PortfolioEngine:
    return PortfolioEngine(market_data_service=market_data_service, settlement_currency="USD")


@pytest.fixture
def holding_service(holding_repo) -> HoldingService:
    return HoldingService(holding_repo=holding_repo)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(jwt_secret="test-secret", quote_provider="stub")


@pytest.fixture
def auth_service(user_repo, test_settings) -> AuthService:
    return AuthService(user_repo=user_repo, settings=test_settings)


@pytest.fixture
def owner(auth_service):
    """A registered user, returned as the domain User."""
    return auth_service.register("owner@example.com", "secret123").user


# =============================================================================
# API TEST CLIENT FIXTURES
# =============================================================================


@pytest.fixture
def client(test_engine, market_data_service) -> TestClient:
    """Provide FastAPI test client with test database and recording providers."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_market_data_service] = lambda: market_data_service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    close_market_stack()


@pytest.fixture
def register_user(client) -> Callable[..., dict]:
    """Register a user over the API; returns {"id", "token", "headers"}."""

    def _register(email: Optional[str] = None, password: str = "secret123") -> dict:
        email = email or f"user-{uuid.uuid4().hex[:8]}@example.com"
        response = client.post("/api/auth/register", json={"email": email, "password": password})
        assert response.status_code == 201, response.text
        body = response.json()
        return {
            "id": body["user"]["id"],
            "token": body["token"],
            "headers": {"Authorization": f"Bearer {body['token']}"},
        }

    return _register


@pytest.fixture
def user(register_user) -> dict:
    return register_user()


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def assert_decimal_equal(
    actual: Decimal,
    expected: Decimal,
    tolerance: Decimal = Decimal("0.0001"),
) -> None:
    """Assert two Decimals are equal within tolerance."""
    diff = abs(actual - expected)
    assert diff <= tolerance, f"Expected {expected}, got {actual} (diff={diff})"
