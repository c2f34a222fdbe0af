"""Pydantic schemas for portfolio view, quote, search and history API."""

from datetime import datetime
from typing import Optional

from pydantic import Field, SerializerFunctionWrapHandler, model_serializer

from folio.api.schemas.base import CamelModel


class EnrichedHoldingOut(CamelModel):
    """
    A holding with live valuation.

    Valuation fields are null and error is set when the quote lookup failed.
    """

    id: str
    symbol: str
    asset_class: str
    quantity: float
    buy_price: float
    current_price: Optional[float] = None
    currency: str
    current_value: Optional[float] = None
    invested: float
    pnl: Optional[float] = None
    pnl_pct: Optional[float] = None
    error: Optional[str] = None
    created_at: Optional[datetime] = None

    @model_serializer(mode="wrap")
    def drop_error_when_valued(self, handler: SerializerFunctionWrapHandler) -> dict:
        # Only rows whose quote lookup failed carry an error key
        data = handler(self)
        if self.error is None:
            data.pop("error", None)
        return data


class PortfolioSummaryOut(CamelModel):
    """Totals across the portfolio."""

    total_invested: float
    total_current_value: float
    net_pnl: float = Field(..., alias="netPnL")
    net_pnl_pct: float = Field(..., alias="netPnLPct")


class PortfolioOut(CamelModel):
    """Portfolio view response."""

    currency: str
    assets: list[EnrichedHoldingOut]
    summary: PortfolioSummaryOut


class QuoteOut(CamelModel):
    """Single normalized quote."""

    symbol: str
    price: float
    currency: str
    source: str


class SymbolMatchOut(CamelModel):
    """Symbol search hit."""

    symbol: str
    name: str
    region: Optional[str] = None
    currency: Optional[str] = None


class PricePointOut(CamelModel):
    time: datetime
    close: float


class PriceHistoryOut(CamelModel):
    """Chart series for one symbol."""

    symbol: str
    currency: str
    source: str
    points: list[PricePointOut]
