"""View models for portfolio valuation and chart outputs."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from folio.domain.models.enums import AssetClass


@dataclass
class EnrichedHolding:
    """
    A holding with live valuation attached.

    On a failed quote lookup, current_price, current_value, pnl and pnl_pct
    are None and error carries the failure message; invested is always set.
    """

    holding_id: str
    symbol: str
    asset_class: AssetClass
    quantity: Decimal
    buy_price: Decimal
    currency: str
    invested: Decimal
    current_price: Optional[Decimal] = None
    current_value: Optional[Decimal] = None
    pnl: Optional[Decimal] = None
    pnl_pct: Optional[Decimal] = None
    error: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def is_valued(self) -> bool:
        return self.error is None


@dataclass
class PortfolioSummary:
    """Totals across all enriched holdings."""

    total_invested: Decimal = field(default_factory=lambda: Decimal("0"))
    total_current_value: Decimal = field(default_factory=lambda: Decimal("0"))
    net_pnl: Decimal = field(default_factory=lambda: Decimal("0"))
    net_pnl_pct: Decimal = field(default_factory=lambda: Decimal("0"))


@dataclass
class PortfolioView:
    """Response body of a portfolio view request."""

    currency: str
    assets: list[EnrichedHolding] = field(default_factory=list)
    summary: PortfolioSummary = field(default_factory=PortfolioSummary)


@dataclass
class PricePoint:
    """Single close on a price chart."""

    time: datetime
    close: Decimal


@dataclass
class PriceHistory:
    """Chart series for one symbol."""

    symbol: str
    currency: str
    source: str
    points: list[PricePoint] = field(default_factory=list)


@dataclass
class SymbolMatch:
    """Symbol search result."""

    symbol: str
    name: str
    region: Optional[str] = None
    currency: Optional[str] = None
