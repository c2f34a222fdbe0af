"""SQLAlchemy implementation of UserRepository."""

from typing import Optional

from sqlalchemy.orm import Session

from folio.core.timezone import now_utc
from folio.domain.models import User
from folio.repositories.sqlalchemy.orm_models import UserORM


class SqlAlchemyUserRepository:
    """SQLAlchemy-backed user repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, user: User) -> User:
        """Persist a new user."""
        orm_user = UserORM(
            user_id=user.user_id,
            email=user.email,
            password_hash=user.password_hash,
            created_at=user.created_at or now_utc(),
        )
        self._db.add(orm_user)
        self._db.commit()
        self._db.refresh(orm_user)
        return self._to_domain(orm_user)

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Retrieve user by ID."""
        orm_user = self._db.query(UserORM).filter(UserORM.user_id == user_id).first()
        return self._to_domain(orm_user) if orm_user else None

    def get_by_email(self, email: str) -> Optional[User]:
        """Retrieve user by email."""
        orm_user = self._db.query(UserORM).filter(UserORM.email == email.lower()).first()
        return self._to_domain(orm_user) if orm_user else None

    @staticmethod
    def _to_domain(orm: UserORM) -> User:
        """Convert ORM model to domain model."""
        return User(
            user_id=orm.user_id,
            email=orm.email,
            password_hash=orm.password_hash,
            created_at=orm.created_at,
        )
