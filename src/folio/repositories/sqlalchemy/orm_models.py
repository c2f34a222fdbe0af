"""SQLAlchemy ORM model definitions."""

from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    String,
    DateTime,
    ForeignKey,
    Numeric,
    Enum as SqlEnum,
)
from sqlalchemy.orm import relationship

from folio.repositories.sqlalchemy.database import Base
from folio.domain.models.enums import AssetClass


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserORM(Base):
    """SQLAlchemy model for User."""

    __tablename__ = "users"

    user_id = Column(String(36), primary_key=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    holdings = relationship("HoldingORM", back_populates="owner", cascade="all, delete-orphan")


class HoldingORM(Base):
    """SQLAlchemy model for Holding."""

    __tablename__ = "holdings"

    holding_id = Column(String(36), primary_key=True)
    owner_id = Column(String(36), ForeignKey("users.user_id"), nullable=False, index=True)
    symbol = Column(String(32), nullable=False)
    asset_class = Column(
        SqlEnum(AssetClass, values_callable=lambda enum: [e.value for e in enum]),
        nullable=False,
    )
    quantity = Column(Numeric(precision=28, scale=10), nullable=False)
    buy_price = Column(Numeric(precision=28, scale=10), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=True, onupdate=_utcnow)

    owner = relationship("UserORM", back_populates="holdings")
