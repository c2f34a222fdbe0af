"""Holdings API: add, edit and delete the caller's holdings."""

from fastapi import APIRouter, Depends

from folio.api.deps import get_current_user_id, get_holding_service
from folio.api.schemas import (
    DeleteResponse,
    HoldingCreateSchema,
    HoldingOut,
    HoldingUpdateSchema,
)
from folio.domain.models import Holding
from folio.services import HoldingCreate, HoldingService, HoldingUpdate

router = APIRouter(prefix="/api/portfolio", tags=["holdings"])


def holding_to_out(holding: Holding) -> HoldingOut:
    return HoldingOut(
        id=holding.holding_id,
        user_id=holding.owner_id,
        symbol=holding.symbol,
        asset_class=holding.asset_class.value,
        quantity=float(holding.quantity),
        buy_price=float(holding.buy_price),
        created_at=holding.created_at,
        updated_at=holding.updated_at,
    )


@router.post("/add", response_model=HoldingOut, status_code=201)
def add_holding(
    data: HoldingCreateSchema,
    owner_id: str = Depends(get_current_user_id),
    holding_service: HoldingService = Depends(get_holding_service),
):
    """Add a holding for the caller."""
    holding = holding_service.add_holding(
        owner_id,
        HoldingCreate(
            symbol=data.symbol,
            asset_class=data.asset_class,
            quantity=data.quantity,
            buy_price=data.buy_price,
        ),
    )
    return holding_to_out(holding)


@router.put("/{holding_id}", response_model=HoldingOut)
def update_holding(
    holding_id: str,
    data: HoldingUpdateSchema,
    owner_id: str = Depends(get_current_user_id),
    holding_service: HoldingService = Depends(get_holding_service),
):
    """Edit one of the caller's holdings; 404 if it is not theirs."""
    holding = holding_service.update_holding(
        owner_id,
        holding_id,
        HoldingUpdate(
            symbol=data.symbol,
            asset_class=data.asset_class,
            quantity=data.quantity,
            buy_price=data.buy_price,
        ),
    )
    return holding_to_out(holding)


@router.delete("/{holding_id}", response_model=DeleteResponse)
def delete_holding(
    holding_id: str,
    owner_id: str = Depends(get_current_user_id),
    holding_service: HoldingService = Depends(get_holding_service),
):
    """Delete one of the caller's holdings; 404 if it is not theirs."""
    holding_service.delete_holding(owner_id, holding_id)
    return DeleteResponse(ok=True)
