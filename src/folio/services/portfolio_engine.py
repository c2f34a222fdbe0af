"""Portfolio engine: live valuation and PnL for a list of holdings."""

import logging
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from folio.core.exceptions import AppError
from folio.domain.models import Holding
from folio.domain.views import EnrichedHolding, PortfolioSummary, PortfolioView, Quote
from folio.services.market_data_service import MarketDataService

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def pnl_percent(pnl: Decimal, invested: Decimal) -> Decimal:
    """PnL as a percentage of invested capital; 0 when nothing was invested."""
    if invested > 0:
        return pnl / invested * HUNDRED
    return ZERO


class PortfolioEngine:
    """
    Engine for valuing holdings against live quotes.

    Holdings are processed one at a time, in input order, so at most one
    upstream call is in flight per request. A failed quote lookup turns into
    an error row for that holding and never aborts the batch.
    """

    def __init__(self, market_data_service: MarketDataService, settlement_currency: str = "USD"):
        self._market_data = market_data_service
        self._currency = settlement_currency.upper()

    @property
    def currency(self) -> str:
        return self._currency

    def enrich(self, holdings: Iterable[Holding]) -> list[EnrichedHolding]:
        """Value each holding; output is one-to-one with input and keeps its order."""
        return [self._enrich_one(holding) for holding in holdings]

    def build_view(self, holdings: Sequence[Holding]) -> PortfolioView:
        """Enrich holdings and aggregate them into a portfolio view."""
        assets = self.enrich(holdings)
        return PortfolioView(currency=self._currency, assets=assets, summary=summarize(assets))

    def _enrich_one(self, holding: Holding) -> EnrichedHolding:
        quote: Optional[Quote] = None
        error: Optional[str] = None
        try:
            quote = self._market_data.get_quote(holding.symbol, holding.asset_class)
        except AppError as exc:
            logger.warning(
                "Quote lookup failed for %s (%s): %s",
                holding.symbol,
                holding.asset_class.value,
                exc.message,
            )
            error = exc.message

        if quote is None:
            return self._failed(holding, error or "Quote unavailable")
        return self._valued(holding, quote)

    def _valued(self, holding: Holding, quote: Quote) -> EnrichedHolding:
        invested = holding.invested
        current_value = quote.price * holding.quantity
        pnl = current_value - invested
        return EnrichedHolding(
            holding_id=holding.holding_id,
            symbol=holding.symbol,
            asset_class=holding.asset_class,
            quantity=holding.quantity,
            buy_price=holding.buy_price,
            currency=quote.currency,
            invested=invested,
            current_price=quote.price,
            current_value=current_value,
            pnl=pnl,
            pnl_pct=pnl_percent(pnl, invested),
            created_at=holding.created_at,
        )

    def _failed(self, holding: Holding, error: str) -> EnrichedHolding:
        return EnrichedHolding(
            holding_id=holding.holding_id,
            symbol=holding.symbol,
            asset_class=holding.asset_class,
            quantity=holding.quantity,
            buy_price=holding.buy_price,
            currency=self._currency,
            invested=holding.invested,
            error=error,
            created_at=holding.created_at,
        )


def summarize(assets: Iterable[EnrichedHolding]) -> PortfolioSummary:
    """
    Aggregate enriched holdings.

    Every holding contributes its invested amount; only valued holdings
    contribute a current value.
    """
    total_invested = ZERO
    total_current = ZERO
    for asset in assets:
        total_invested += asset.invested
        total_current += asset.current_value if asset.current_value is not None else ZERO

    net_pnl = total_current - total_invested
    return PortfolioSummary(
        total_invested=total_invested,
        total_current_value=total_current,
        net_pnl=net_pnl,
        net_pnl_pct=pnl_percent(net_pnl, total_invested),
    )
