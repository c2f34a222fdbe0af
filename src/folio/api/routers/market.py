"""Market API: single quote, symbol search and price history."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from folio.api.deps import (
    get_current_user_id,
    get_history_service,
    get_market_data_service,
    get_search_service,
)
from folio.api.schemas import PriceHistoryOut, PricePointOut, QuoteOut, SymbolMatchOut
from folio.services import HistoryService, MarketDataService, SearchService
from folio.services.market_lookup_service import DEFAULT_HISTORY_INTERVAL, DEFAULT_HISTORY_RANGE

router = APIRouter(prefix="/api/portfolio", tags=["market"])


@router.get("/search", response_model=list[SymbolMatchOut])
def search_symbols(
    q: Optional[str] = Query(None, description="Search keywords"),
    search_type: str = Query("stock", alias="type", description='"crypto" searches CoinGecko; anything else searches equities'),
    search_service: SearchService = Depends(get_search_service),
):
    """Symbol search passthrough (Alpha Vantage for equities, CoinGecko for crypto)."""
    matches = search_service.search(q or "", search_type)
    return [
        SymbolMatchOut(symbol=m.symbol, name=m.name, region=m.region, currency=m.currency)
        for m in matches
    ]


@router.get("/quote/{asset_type}/{symbol}", response_model=QuoteOut)
def get_quote(
    asset_type: str,
    symbol: str,
    _owner_id: str = Depends(get_current_user_id),
    market_data_service: MarketDataService = Depends(get_market_data_service),
):
    """
    Resolve one quote through the cache.

    With no batch to isolate it, a provider failure is the request's failure.
    """
    quote = market_data_service.get_quote(symbol, asset_type)
    return QuoteOut(
        symbol=quote.symbol,
        price=float(quote.price),
        currency=quote.currency,
        source=quote.source,
    )


@router.get("/history/{symbol}", response_model=PriceHistoryOut)
def get_history(
    symbol: str,
    asset_type: str = Query("equity", alias="type", description="Asset class of the symbol"),
    range_: str = Query(DEFAULT_HISTORY_RANGE, alias="range"),
    interval: str = Query(DEFAULT_HISTORY_INTERVAL),
    _owner_id: str = Depends(get_current_user_id),
    history_service: HistoryService = Depends(get_history_service),
):
    """Close-price series for charting."""
    history = history_service.get_history(symbol, asset_type, range_, interval)
    return PriceHistoryOut(
        symbol=history.symbol,
        currency=history.currency,
        source=history.source,
        points=[PricePointOut(time=p.time, close=float(p.close)) for p in history.points],
    )
