"""API routers package."""

from folio.api.routers.auth import router as auth_router
from folio.api.routers.holdings import router as holdings_router
from folio.api.routers.market import router as market_router
from folio.api.routers.portfolio import router as portfolio_router

__all__ = [
    "auth_router",
    "holdings_router",
    "market_router",
    "portfolio_router",
]
