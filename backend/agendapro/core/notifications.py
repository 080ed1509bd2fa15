"""
Notification sink used by the services.

Services call the notifier exactly once per operation outcome. Controllers
hand a fresh ``CollectingNotifier`` to the service for each request and use
the recorded notification as the message of the JSON response.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from agendapro.domain.interfaces import INotifier

logger = logging.getLogger(__name__)

LEVEL_SUCCESS = "success"
LEVEL_ERROR = "error"


@dataclass(frozen=True)
class Notification:
    level: str
    title: str
    description: str


class CollectingNotifier(INotifier):
    """Records notifications in order and mirrors them to the log."""

    def __init__(self) -> None:
        self.notifications: List[Notification] = []

    def success(self, title: str, description: str) -> None:
        self._record(Notification(LEVEL_SUCCESS, title, description))

    def error(self, title: str, description: str) -> None:
        self._record(Notification(LEVEL_ERROR, title, description))

    @property
    def last(self) -> Optional[Notification]:
        return self.notifications[-1] if self.notifications else None

    def _record(self, notification: Notification) -> None:
        self.notifications.append(notification)
        log = logger.info if notification.level == LEVEL_SUCCESS else logger.warning
        log(
            f"{notification.title}: {notification.description}",
            extra={"context": {"level": notification.level}},
        )
