"""
Shared outcome handling for the application services.

Every operation reports exactly one notification: the success message after
the work is done, or the failure message of whatever went wrong. Failures are
re-raised unchanged after notifying; nothing is retried.
"""

import logging
from contextlib import contextmanager
from typing import Callable, Hashable, Iterator, List, Optional, TypeVar

from agendapro.core.cache import CollectionCache
from agendapro.core.exceptions import AgendaError, Unauthenticated
from agendapro.domain.interfaces import INotifier

logger = logging.getLogger(__name__)

T = TypeVar("T")


class NotifyingService:
    def __init__(self, notifier: INotifier, cache: CollectionCache) -> None:
        self.notifier = notifier
        self.cache = cache

    @staticmethod
    def _require_owner(owner_id: Optional[str]) -> str:
        if not owner_id:
            raise Unauthenticated()
        return owner_id

    @contextmanager
    def _outcome(self, error_title: str) -> Iterator[None]:
        try:
            yield
        except AgendaError as e:
            self.notifier.error(error_title, e.message)
            raise
        except Exception as e:
            logger.error(
                f"Unexpected failure: {error_title}",
                extra={"context": {"error": str(e)}},
                exc_info=True,
            )
            self.notifier.error(error_title, str(e))
            raise

    def _cached_list(
        self,
        table: str,
        owner_id: Optional[str],
        fetch: Callable[[], List[T]],
        key: Hashable = None,
    ) -> List[T]:
        """Owner collection through the cache; empty when signed out.

        Reads send no success notification, only a failure one.
        """
        if not owner_id:
            return []
        with self._outcome("Erro ao carregar"):
            return self.cache.get_or_fetch(table, owner_id, fetch, key=key)

    def parse_request(
        self, owner_id: Optional[str], error_title: str, parse: Callable[[], T]
    ) -> T:
        """Build a request DTO for a mutation.

        The owner check runs first, so a signed-out caller always gets
        ``Unauthenticated`` whatever the payload holds. A malformed payload
        is reported with the same title the mutation itself would use.
        """
        with self._outcome(error_title):
            self._require_owner(owner_id)
            return parse()
