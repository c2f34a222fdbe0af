"""Holding domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from folio.domain.models.enums import AssetClass


@dataclass
class Holding:
    """
    A position recorded by its owner.

    Quantity and buy price are non-negative; the asset class decides which
    provider prices the symbol.
    """

    holding_id: str
    owner_id: str
    symbol: str
    asset_class: AssetClass
    quantity: Decimal
    buy_price: Decimal
    created_at: Optional[datetime] = field(default=None)
    updated_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.asset_class, str) and not isinstance(self.asset_class, AssetClass):
            self.asset_class = AssetClass.from_tag(self.asset_class)

    @property
    def invested(self) -> Decimal:
        """Capital put into the position at its recorded buy price."""
        return self.buy_price * self.quantity
