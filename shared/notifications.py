"""Fire-and-forget notification sinks for the human operator.

Notifications are purely observational: they never decide whether an
operation succeeded.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class Level(Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class Notification:
    level: Level
    text: str


class Notifier(ABC):
    """Interface for showing success/error messages."""

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        ...

    def success(self, text: str) -> None:
        self.notify(Notification(Level.SUCCESS, text))

    def error(self, text: str) -> None:
        self.notify(Notification(Level.ERROR, text))

    def info(self, text: str) -> None:
        self.notify(Notification(Level.INFO, text))


class LoggingNotifier(Notifier):
    """Writes notifications to the application log."""

    def notify(self, notification: Notification) -> None:
        if notification.level is Level.ERROR:
            logger.warning("notify[%s] %s", notification.level.value, notification.text)
        else:
            logger.info("notify[%s] %s", notification.level.value, notification.text)


class CollectingNotifier(Notifier):
    """Keeps notifications so a handler can return them with the response."""

    def __init__(self, forward: Notifier | None = None) -> None:
        self.notifications: list[Notification] = []
        self._forward = forward

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)
        if self._forward is not None:
            self._forward.notify(notification)

    def as_payload(self) -> list[dict[str, str]]:
        return [{"level": n.level.value, "text": n.text} for n in self.notifications]
