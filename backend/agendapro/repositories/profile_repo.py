"""Profile (settings) repository."""

from typing import Any, Dict, Optional

from agendapro.db.base import Profile as DbProfile
from agendapro.domain.entities import Profile as DomainProfile
from agendapro.domain.interfaces import IProfileRepository
from agendapro.repositories.base_repo import OwnedRepository, store_errors


class ProfileRepository(OwnedRepository, IProfileRepository):
    model = DbProfile
    resource = "Profile"

    def get_for_owner(self, owner_id: str) -> Optional[DomainProfile]:
        with store_errors(self.db, "get profiles"):
            row = self._owned(owner_id).first()
        return self._to_domain(row) if row else None

    def upsert(self, owner_id: str, fields: Dict[str, Any]) -> DomainProfile:
        with store_errors(self.db, "upsert profiles"):
            row = self._owned(owner_id).first()
            if row is None:
                row = DbProfile(owner_id=owner_id)
                self.db.add(row)
            for name, value in fields.items():
                setattr(row, name, value)
            self.db.commit()
            self.db.refresh(row)
        return self._to_domain(row)

    def _to_domain(self, db_profile: DbProfile) -> DomainProfile:
        return DomainProfile(
            id=db_profile.id,
            owner_id=db_profile.owner_id,
            business_name=db_profile.business_name,
            phone=db_profile.phone,
            working_hours_start=db_profile.working_hours_start,
            working_hours_end=db_profile.working_hours_end,
            working_days=list(db_profile.working_days or []),
            created_at=db_profile.created_at,
            updated_at=db_profile.updated_at,
        )
