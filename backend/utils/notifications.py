"""
User-facing notifications (toasts)

The backend only talks to a Notifier; the Streamlit front end supplies
one that shows toasts, tests use RecordingNotifier.
"""
from dataclasses import dataclass
from typing import List

from backend.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Notification:
    level: str
    message: str


class Notifier:
    """Base notifier: every level goes through notify()"""

    def notify(self, level: str, message: str) -> None:
        raise NotImplementedError

    def info(self, message: str) -> None:
        self.notify("info", message)

    def success(self, message: str) -> None:
        self.notify("success", message)

    def warning(self, message: str) -> None:
        self.notify("warning", message)

    def error(self, message: str) -> None:
        self.notify("error", message)


class LoggingNotifier(Notifier):
    """Fallback when no UI is attached"""

    def notify(self, level: str, message: str) -> None:
        if level == "error":
            logger.error("notification", message=message)
        elif level == "warning":
            logger.warning("notification", message=message)
        else:
            logger.info("notification", level=level, message=message)


class RecordingNotifier(Notifier):
    """Keeps notifications in memory"""

    def __init__(self):
        self.notifications: List[Notification] = []

    def notify(self, level: str, message: str) -> None:
        self.notifications.append(Notification(level, message))

    def messages(self, level: str = None) -> List[str]:
        return [n.message for n in self.notifications
                if level is None or n.level == level]

    def clear(self) -> None:
        self.notifications.clear()
