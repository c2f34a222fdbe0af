"""View models for service outputs."""

from folio.domain.views.quote import Quote
from folio.domain.views.portfolio import (
    EnrichedHolding,
    PortfolioSummary,
    PortfolioView,
    PricePoint,
    PriceHistory,
    SymbolMatch,
)

__all__ = [
    "Quote",
    "EnrichedHolding",
    "PortfolioSummary",
    "PortfolioView",
    "PricePoint",
    "PriceHistory",
    "SymbolMatch",
]
