"""Pydantic request/response schemas."""

from folio.api.schemas.auth import Credentials, UserOut, AuthResponse
from folio.api.schemas.holding import (
    HoldingCreateSchema,
    HoldingUpdateSchema,
    HoldingOut,
    DeleteResponse,
)
from folio.api.schemas.portfolio import (
    EnrichedHoldingOut,
    PortfolioSummaryOut,
    PortfolioOut,
    QuoteOut,
    SymbolMatchOut,
    PricePointOut,
    PriceHistoryOut,
)

__all__ = [
    "Credentials",
    "UserOut",
    "AuthResponse",
    "HoldingCreateSchema",
    "HoldingUpdateSchema",
    "HoldingOut",
    "DeleteResponse",
    "EnrichedHoldingOut",
    "PortfolioSummaryOut",
    "PortfolioOut",
    "QuoteOut",
    "SymbolMatchOut",
    "PricePointOut",
    "PriceHistoryOut",
]
