"""Holding service for owner-scoped holding management."""

import uuid
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from folio.core.timezone import now_utc
from folio.core.exceptions import ValidationError, NotFoundError
from folio.domain.models import AssetClass, Holding
from folio.repositories.protocols import HoldingRepository


MAX_SYMBOL_LENGTH = 32


@dataclass
class HoldingCreate:
    """Input data for adding a holding."""

    symbol: str
    asset_class: str
    quantity: Decimal
    buy_price: Decimal


@dataclass
class HoldingUpdate:
    """Partial update data for editing a holding."""

    symbol: Optional[str] = None
    asset_class: Optional[str] = None
    quantity: Optional[Decimal] = None
    buy_price: Optional[Decimal] = None


class HoldingService:
    """
    Service for managing an owner's holdings.

    Every operation takes the authenticated owner id; a holding that belongs
    to someone else is reported as not found.
    """

    def __init__(self, holding_repo: HoldingRepository):
        self._holding_repo = holding_repo

    def list_holdings(self, owner_id: str) -> list[Holding]:
        """List holdings, newest first."""
        return self._holding_repo.list_by_owner(owner_id)

    def get_holding(self, owner_id: str, holding_id: str) -> Holding:
        """Get one of the owner's holdings."""
        holding = self._holding_repo.get_for_owner(holding_id, owner_id)
        if not holding:
            raise NotFoundError("Holding", holding_id)
        return holding

    def add_holding(self, owner_id: str, data: HoldingCreate) -> Holding:
        """Validate and persist a new holding."""
        holding = Holding(
            holding_id=str(uuid.uuid4()),
            owner_id=owner_id,
            symbol=self._validate_symbol(data.symbol),
            asset_class=self._validate_asset_class(data.asset_class),
            quantity=self._validate_quantity(data.quantity),
            buy_price=self._validate_buy_price(data.buy_price),
            created_at=now_utc(),
        )
        return self._holding_repo.create(holding)

    def update_holding(self, owner_id: str, holding_id: str, data: HoldingUpdate) -> Holding:
        """Apply a partial update to one of the owner's holdings."""
        holding = self.get_holding(owner_id, holding_id)

        if data.symbol is not None:
            holding.symbol = self._validate_symbol(data.symbol)
        if data.asset_class is not None:
            holding.asset_class = self._validate_asset_class(data.asset_class)
        if data.quantity is not None:
            holding.quantity = self._validate_quantity(data.quantity)
        if data.buy_price is not None:
            holding.buy_price = self._validate_buy_price(data.buy_price)
        holding.updated_at = now_utc()

        return self._holding_repo.update(holding)

    def delete_holding(self, owner_id: str, holding_id: str) -> None:
        """Delete one of the owner's holdings."""
        if not self._holding_repo.delete(holding_id, owner_id):
            raise NotFoundError("Holding", holding_id)

    @staticmethod
    def _validate_symbol(symbol: str) -> str:
        normalized = (symbol or "").strip().upper()
        if not normalized:
            raise ValidationError("Symbol is required")
        if len(normalized) > MAX_SYMBOL_LENGTH:
            raise ValidationError(f"Symbol must be at most {MAX_SYMBOL_LENGTH} characters")
        return normalized

    @staticmethod
    def _validate_asset_class(tag: str) -> AssetClass:
        try:
            return AssetClass.from_tag(tag)
        except ValueError:
            allowed = ", ".join(a.value for a in AssetClass)
            raise ValidationError(f"Asset class must be one of: {allowed}") from None

    @staticmethod
    def _validate_quantity(quantity: Decimal) -> Decimal:
        if quantity is None or quantity <= 0:
            raise ValidationError("Quantity must be positive")
        return quantity

    @staticmethod
    def _validate_buy_price(buy_price: Decimal) -> Decimal:
        if buy_price is None or buy_price < 0:
            raise ValidationError("Buy price must be non-negative")
        return buy_price
