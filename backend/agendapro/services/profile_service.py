"""
Business settings of the owner.

No profile row exists until the first save. Until then reads return the
built-in defaults (08:00-18:00, Monday to Saturday) without writing anything.
"""

import dataclasses
from typing import Optional

from agendapro.core import config
from agendapro.core.cache import PROFILES, CollectionCache
from agendapro.domain.entities import Profile
from agendapro.domain.interfaces import INotifier, IProfileRepository
from agendapro.schemas.dtos import ProfileUpdateRequest, validate_working_hours
from agendapro.services.base_service import NotifyingService

_SETTINGS_FIELDS = (
    "business_name",
    "phone",
    "working_hours_start",
    "working_hours_end",
    "working_days",
)


def default_profile(owner_id: str) -> Profile:
    return Profile(
        owner_id=owner_id,
        working_hours_start=config.DEFAULT_WORKING_HOURS_START,
        working_hours_end=config.DEFAULT_WORKING_HOURS_END,
        working_days=list(config.DEFAULT_WORKING_DAYS),
    )


def with_defaults(profile: Profile) -> Profile:
    """Fill the empty working-hours fields of a stored profile with defaults."""
    defaults = default_profile(profile.owner_id)
    return dataclasses.replace(
        profile,
        working_hours_start=profile.working_hours_start
        or defaults.working_hours_start,
        working_hours_end=profile.working_hours_end or defaults.working_hours_end,
        working_days=profile.working_days or defaults.working_days,
    )


class ProfileService(NotifyingService):
    def __init__(
        self,
        profile_repo: IProfileRepository,
        notifier: INotifier,
        cache: CollectionCache,
    ) -> None:
        super().__init__(notifier, cache)
        self.profile_repo = profile_repo

    def get_settings(self, owner_id: Optional[str]) -> Optional[Profile]:
        """Effective settings of the owner (None when signed out)."""
        if not owner_id:
            return None
        with self._outcome("Erro ao carregar"):
            return self._effective_settings(owner_id)

    def _effective_settings(self, owner_id: str) -> Profile:
        stored = self.cache.get_or_fetch(
            PROFILES, owner_id, lambda: self.profile_repo.get_for_owner(owner_id)
        )
        return with_defaults(stored) if stored else default_profile(owner_id)

    def save_settings(
        self, owner_id: Optional[str], request: ProfileUpdateRequest
    ) -> Profile:
        """Save the patch on top of the effective settings (creates the row on first save)."""
        with self._outcome("Erro ao salvar"):
            owner_id = self._require_owner(owner_id)
            request.validate()

            current = self._effective_settings(owner_id)
            merged = dataclasses.replace(current, **request.fields)
            validate_working_hours(merged.working_hours_start, merged.working_hours_end)

            saved = self.profile_repo.upsert(
                owner_id, {name: getattr(merged, name) for name in _SETTINGS_FIELDS}
            )
            self.cache.invalidate(PROFILES, owner_id)

        self.notifier.success(
            "Configurações salvas!", "Suas alterações foram salvas com sucesso."
        )
        return saved
