from typing import Optional

from agendapro.db.base import User as DbUser
from agendapro.domain.entities import User as DomainUser
from agendapro.domain.interfaces import IUserRepository
from agendapro.repositories.base_repo import store_errors


class UserRepository(IUserRepository):
    """Repository for owner accounts.

    Maps between domain entities and database models; the password hash is
    only ever written here, never returned to controllers.
    """

    def __init__(self, db_session) -> None:
        self.db = db_session

    def get_db_by_id(self, user_id: str) -> Optional[DbUser]:
        """Get user by ID, returning database model (for Flask-Login)."""
        return self.db.get(DbUser, user_id)

    def get_by_id(self, user_id: str) -> Optional[DomainUser]:
        db_user = self.get_db_by_id(user_id)
        return self._to_domain(db_user) if db_user else None

    def get_by_email(self, email: str) -> Optional[DomainUser]:
        db_user = self.db.query(DbUser).filter_by(email=email).first()
        return self._to_domain(db_user) if db_user else None

    def create(self, user: DomainUser) -> DomainUser:
        db_user = DbUser(email=user.email, password_hash=user.password_hash)
        with store_errors(self.db, "insert users"):
            self.db.add(db_user)
            self.db.commit()
            self.db.refresh(db_user)
        return self._to_domain(db_user)

    def _to_domain(self, db_user: DbUser) -> DomainUser:
        return DomainUser(
            id=db_user.id,
            email=db_user.email,
            password_hash=db_user.password_hash,
            created_at=db_user.created_at,
        )
