"""Dependency injection for FastAPI."""

from dataclasses import dataclass
from typing import Optional

import httpx
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from folio.config.settings import Settings, get_settings
from folio.core.exceptions import AuthenticationError
from folio.repositories.sqlalchemy import (
    get_db,
    SqlAlchemyHoldingRepository,
    SqlAlchemyUserRepository,
)
from folio.providers import (
    AlphaVantageSearchProvider,
    CoinGeckoQuoteProvider,
    StubQuoteProvider,
    YahooQuoteProvider,
)
from folio.providers.coingecko_provider import require_coin_id
from folio.providers.stub_provider import STUB_CRYPTO_PRICES, STUB_EQUITY_PRICES
from folio.services import (
    AuthService,
    HistoryService,
    HoldingService,
    MarketDataService,
    PortfolioEngine,
    QuoteCache,
    QuoteResolver,
    SearchService,
)


bearer_scheme = HTTPBearer(auto_error=False)


@dataclass
class MarketStack:
    """Process-wide market data collaborators, created once."""

    http_client: Optional[httpx.Client]
    cache: QuoteCache
    market_data: MarketDataService
    search: SearchService
    history: HistoryService


# Created on first use, torn down in the app lifespan
_market_stack: Optional[MarketStack] = None


def build_market_stack(settings: Settings) -> MarketStack:
    """Wire providers, resolver and cache according to settings."""
    currency = settings.get_settlement_currency()
    cache = QuoteCache(
        equity_ttl_seconds=settings.equity_quote_ttl_seconds,
        crypto_ttl_seconds=settings.crypto_quote_ttl_seconds,
    )

    if settings.quote_provider == "stub":
        equity_stub = StubQuoteProvider(settlement_currency=currency, prices=STUB_EQUITY_PRICES)
        crypto_stub = StubQuoteProvider(
            settlement_currency=currency,
            prices=STUB_CRYPTO_PRICES,
            symbol_check=require_coin_id,
        )
        return MarketStack(
            http_client=None,
            cache=cache,
            market_data=MarketDataService(QuoteResolver(equity_stub, crypto_stub), cache),
            search=SearchService(equity_stub, crypto_stub),
            history=HistoryService(equity_stub, crypto_stub),
        )

    client = httpx.Client(timeout=settings.http_timeout_seconds)
    yahoo = YahooQuoteProvider(settlement_currency=currency)
    coingecko = CoinGeckoQuoteProvider(
        client,
        settlement_currency=currency,
        base_url=settings.coingecko_base_url,
        api_key=settings.coingecko_api_key,
    )
    alpha_vantage = AlphaVantageSearchProvider(
        client,
        api_key=settings.alpha_vantage_api_key,
        base_url=settings.alpha_vantage_base_url,
    )
    return MarketStack(
        http_client=client,
        cache=cache,
        market_data=MarketDataService(QuoteResolver(yahoo, coingecko), cache),
        search=SearchService(alpha_vantage, coingecko),
        history=HistoryService(yahoo, coingecko),
    )


def get_market_stack() -> MarketStack:
    """Return the process-wide market stack, building it on first use."""
    global _market_stack
    if _market_stack is None:
        _market_stack = build_market_stack(get_settings())
    return _market_stack


def close_market_stack() -> None:
    """Close the shared HTTP client and drop cached state."""
    global _market_stack
    if _market_stack is not None and _market_stack.http_client is not None:
        _market_stack.http_client.close()
    _market_stack = None


def get_settings_dep() -> Settings:
    """Provide current Settings."""
    return get_settings()


def get_user_repo(db: Session = Depends(get_db)) -> SqlAlchemyUserRepository:
    """Provide UserRepository instance."""
    return SqlAlchemyUserRepository(db)


def get_holding_repo(db: Session = Depends(get_db)) -> SqlAlchemyHoldingRepository:
    """Provide HoldingRepository instance."""
    return SqlAlchemyHoldingRepository(db)


def get_auth_service(
    user_repo: SqlAlchemyUserRepository = Depends(get_user_repo),
    settings: Settings = Depends(get_settings_dep),
) -> AuthService:
    """Provide AuthService instance."""
    return AuthService(user_repo=user_repo, settings=settings)


def get_holding_service(
    holding_repo: SqlAlchemyHoldingRepository = Depends(get_holding_repo),
) -> HoldingService:
    """Provide HoldingService instance."""
    return HoldingService(holding_repo=holding_repo)


def get_market_data_service() -> MarketDataService:
    """Provide the shared MarketDataService (cache lives for the process)."""
    return get_market_stack().market_data


def get_portfolio_engine(
    market_data_service: MarketDataService = Depends(get_market_data_service),
    settings: Settings = Depends(get_settings_dep),
) -> PortfolioEngine:
    """Provide PortfolioEngine instance."""
    return PortfolioEngine(
        market_data_service=market_data_service,
        settlement_currency=settings.get_settlement_currency(),
    )


def get_search_service() -> SearchService:
    """Provide SearchService instance."""
    return get_market_stack().search


def get_history_service() -> HistoryService:
    """Provide HistoryService instance."""
    return get_market_stack().history


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> str:
    """Resolve the owner id from the Bearer token."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("No token provided")
    return auth_service.authenticate(credentials.credentials)
