"""Portfolio view API: live valuation of the caller's holdings."""

from fastapi import APIRouter, Depends

from folio.api.deps import get_current_user_id, get_holding_service, get_portfolio_engine
from folio.api.schemas import EnrichedHoldingOut, PortfolioOut, PortfolioSummaryOut
from folio.core.exceptions import ForbiddenError
from folio.domain.views import EnrichedHolding, PortfolioView
from folio.services import HoldingService, PortfolioEngine

router = APIRouter(prefix="/api/portfolio", tags=["portfolio"])


def _optional_float(value):
    return float(value) if value is not None else None


def enriched_to_out(asset: EnrichedHolding) -> EnrichedHoldingOut:
    return EnrichedHoldingOut(
        id=asset.holding_id,
        symbol=asset.symbol,
        asset_class=asset.asset_class.value,
        quantity=float(asset.quantity),
        buy_price=float(asset.buy_price),
        current_price=_optional_float(asset.current_price),
        currency=asset.currency,
        current_value=_optional_float(asset.current_value),
        invested=float(asset.invested),
        pnl=_optional_float(asset.pnl),
        pnl_pct=_optional_float(asset.pnl_pct),
        error=asset.error,
        created_at=asset.created_at,
    )


def view_to_out(view: PortfolioView) -> PortfolioOut:
    summary = view.summary
    return PortfolioOut(
        currency=view.currency,
        assets=[enriched_to_out(a) for a in view.assets],
        summary=PortfolioSummaryOut(
            total_invested=float(summary.total_invested),
            total_current_value=float(summary.total_current_value),
            net_pnl=float(summary.net_pnl),
            net_pnl_pct=float(summary.net_pnl_pct),
        ),
    )


@router.get("/{user_id}", response_model=PortfolioOut)
def get_portfolio(
    user_id: str,
    owner_id: str = Depends(get_current_user_id),
    holding_service: HoldingService = Depends(get_holding_service),
    portfolio_engine: PortfolioEngine = Depends(get_portfolio_engine),
):
    """
    Value the caller's holdings, newest first.

    Always 200 once authorized: holdings whose quote failed come back with
    an error string and null valuation fields.
    """
    if user_id != owner_id:
        raise ForbiddenError()
    holdings = holding_service.list_holdings(owner_id)
    return view_to_out(portfolio_engine.build_view(holdings))
