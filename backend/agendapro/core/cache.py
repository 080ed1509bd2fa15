"""
Per-owner collection cache with explicit version markers.

Each ``(table, owner_id)`` pair has a version number. Reads store the fetched
rows together with the version they were fetched at and refetch when the
version has moved on; mutating operations bump the version. This only keeps a
session's reads fresh after its own writes; it does not coordinate concurrent
writers (last write wins at the store).
"""

import logging
import threading
from typing import Any, Callable, Dict, Hashable, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

APPOINTMENTS = "appointments"
CLIENTS = "clients"
SERVICES = "services"
TRANSACTIONS = "transactions"
PROFILES = "profiles"


class CollectionCache:
    """Version-marked cache of per-owner collections."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._versions: Dict[Tuple[str, str], int] = {}
        self._entries: Dict[Tuple[str, str, Hashable], Tuple[int, Any]] = {}

    def version(self, table: str, owner_id: str) -> int:
        with self._lock:
            return self._versions.get((table, owner_id), 0)

    def invalidate(self, table: str, owner_id: str) -> int:
        """Bump the version of a collection and drop its stored values.

        Every key of the collection goes, so per-day reads do not pile up.
        """
        with self._lock:
            new_version = self._versions.get((table, owner_id), 0) + 1
            self._versions[(table, owner_id)] = new_version
            stale = [k for k in self._entries if k[:2] == (table, owner_id)]
            for entry_key in stale:
                del self._entries[entry_key]
        logger.debug(
            "Collection invalidated",
            extra={
                "context": {
                    "table": table,
                    "owner_id": owner_id,
                    "version": new_version,
                    "dropped": len(stale),
                }
            },
        )
        return new_version

    def get_or_fetch(
        self,
        table: str,
        owner_id: str,
        fetch: Callable[[], T],
        key: Hashable = None,
    ) -> T:
        """Return the cached value for ``(table, owner_id, key)``.

        ``fetch`` is called when nothing is cached yet or the cached value was
        read at an older version. The fetch runs outside the lock; the result
        is stored under the version observed before fetching, so an
        invalidation that lands mid-fetch still forces the next read to
        refetch.
        """
        with self._lock:
            current = self._versions.get((table, owner_id), 0)
            entry = self._entries.get((table, owner_id, key))
        if entry is not None and entry[0] == current:
            return entry[1]

        value = fetch()
        with self._lock:
            self._entries[(table, owner_id, key)] = (current, value)
        return value

    def clear(self, owner_id: Optional[str] = None) -> None:
        """Drop cached values (all owners, or one owner on sign-out)."""
        with self._lock:
            if owner_id is None:
                self._entries.clear()
                return
            for entry_key in [k for k in self._entries if k[1] == owner_id]:
                del self._entries[entry_key]
