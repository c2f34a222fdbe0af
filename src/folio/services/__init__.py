"""Service layer - business logic orchestration."""

from folio.services.quote_resolver import QuoteResolver, parse_asset_class
from folio.services.quote_cache import QuoteCache
from folio.services.market_data_service import MarketDataService
from folio.services.portfolio_engine import PortfolioEngine, summarize
from folio.services.holding_service import HoldingService, HoldingCreate, HoldingUpdate
from folio.services.auth_service import AuthService, AuthResult
from folio.services.market_lookup_service import SearchService, HistoryService

__all__ = [
    "QuoteResolver",
    "parse_asset_class",
    "QuoteCache",
    "MarketDataService",
    "PortfolioEngine",
    "summarize",
    "HoldingService",
    "HoldingCreate",
    "HoldingUpdate",
    "AuthService",
    "AuthResult",
    "SearchService",
    "HistoryService",
]
