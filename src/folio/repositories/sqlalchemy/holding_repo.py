"""SQLAlchemy implementation of HoldingRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from folio.core.timezone import now_utc
from folio.domain.models import Holding
from folio.repositories.sqlalchemy.orm_models import HoldingORM


class SqlAlchemyHoldingRepository:
    """SQLAlchemy-backed holding repository; every query is scoped to an owner."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, holding: Holding) -> Holding:
        """Persist a new holding."""
        orm_holding = HoldingORM(
            holding_id=holding.holding_id,
            owner_id=holding.owner_id,
            symbol=holding.symbol,
            asset_class=holding.asset_class,
            quantity=holding.quantity,
            buy_price=holding.buy_price,
            created_at=holding.created_at or now_utc(),
        )
        self._db.add(orm_holding)
        self._db.commit()
        self._db.refresh(orm_holding)
        return self._to_domain(orm_holding)

    def get_for_owner(self, holding_id: str, owner_id: str) -> Optional[Holding]:
        """Retrieve a holding only if it belongs to owner_id."""
        orm_holding = self._query_owned(holding_id, owner_id).first()
        return self._to_domain(orm_holding) if orm_holding else None

    def list_by_owner(self, owner_id: str) -> list[Holding]:
        """List an owner's holdings, newest first."""
        orm_holdings = (
            self._db.query(HoldingORM)
            .filter(HoldingORM.owner_id == owner_id)
            .order_by(HoldingORM.created_at.desc())
            .all()
        )
        return [self._to_domain(h) for h in orm_holdings]

    def update(self, holding: Holding) -> Holding:
        """Update an existing holding."""
        orm_holding = self._query_owned(holding.holding_id, holding.owner_id).first()
        if orm_holding:
            orm_holding.symbol = holding.symbol
            orm_holding.asset_class = holding.asset_class
            orm_holding.quantity = holding.quantity
            orm_holding.buy_price = holding.buy_price
            orm_holding.updated_at = holding.updated_at
            self._db.commit()
            self._db.refresh(orm_holding)
            return self._to_domain(orm_holding)
        raise ValueError(f"Holding not found: {holding.holding_id}")

    def delete(self, holding_id: str, owner_id: str) -> bool:
        """Delete an owner's holding; returns False if nothing matched."""
        deleted = self._query_owned(holding_id, owner_id).delete()
        self._db.commit()
        return deleted > 0

    def _query_owned(self, holding_id: str, owner_id: str):
        return self._db.query(HoldingORM).filter(
            HoldingORM.holding_id == holding_id,
            HoldingORM.owner_id == owner_id,
        )

    @staticmethod
    def _to_domain(orm: HoldingORM) -> Holding:
        """Convert ORM model to domain model."""
        return Holding(
            holding_id=orm.holding_id,
            owner_id=orm.owner_id,
            symbol=orm.symbol,
            asset_class=orm.asset_class,
            quantity=Decimal(str(orm.quantity)),
            buy_price=Decimal(str(orm.buy_price)),
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )
