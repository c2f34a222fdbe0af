"""Pydantic schemas for holding API."""

from datetime import datetime
from decimal import Decimal
from typing import Literal, Optional

from pydantic import AliasChoices, Field

from folio.api.schemas.base import CamelModel

AssetTag = Literal["equity", "fund", "crypto", "commodity", "stock", "mutual_fund"]

# "type" is what older clients send
_ASSET_CLASS_ALIASES = AliasChoices("assetClass", "asset_class", "type")


class HoldingCreateSchema(CamelModel):
    """Schema for adding a holding."""

    symbol: str = Field(..., min_length=1, max_length=32)
    asset_class: AssetTag = Field(..., validation_alias=_ASSET_CLASS_ALIASES)
    quantity: Decimal = Field(..., gt=0)
    buy_price: Decimal = Field(..., ge=0)


class HoldingUpdateSchema(CamelModel):
    """Schema for editing a holding; omitted fields are left unchanged."""

    symbol: Optional[str] = Field(None, min_length=1, max_length=32)
    asset_class: Optional[AssetTag] = Field(None, validation_alias=_ASSET_CLASS_ALIASES)
    quantity: Optional[Decimal] = Field(None, gt=0)
    buy_price: Optional[Decimal] = Field(None, ge=0)


class HoldingOut(CamelModel):
    """A stored holding."""

    id: str
    user_id: str
    symbol: str
    asset_class: str
    quantity: float
    buy_price: float
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DeleteResponse(CamelModel):
    ok: bool = True
