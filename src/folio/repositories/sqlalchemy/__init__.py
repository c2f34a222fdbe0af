"""SQLAlchemy repository implementations."""

from folio.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    init_db,
    reset_database,
    Base,
)
from folio.repositories.sqlalchemy.holding_repo import SqlAlchemyHoldingRepository
from folio.repositories.sqlalchemy.user_repo import SqlAlchemyUserRepository

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyHoldingRepository",
    "SqlAlchemyUserRepository",
]
