"""
User-facing side effects of the API client: notifications and navigation.
"""
import logging
from typing import List

logger = logging.getLogger(__name__)

LOGIN_PATH = "/login"


class Notifier:
    def error(self, message: str) -> None:
        raise NotImplementedError


class LoggingNotifier(Notifier):
    """Default notifier: writes user notifications to the log."""

    def error(self, message: str) -> None:
        logger.warning(f"Notification: {message}")


class RecordingNotifier(Notifier):
    """Keeps every notification in memory, for scripts and tests."""

    def __init__(self):
        self.messages: List[str] = []

    def error(self, message: str) -> None:
        self.messages.append(message)


class Navigator:
    """Tracks the current location and the redirects requested by the client."""

    def __init__(self, current_path: str = "/"):
        self.current_path = current_path
        self.redirects: List[str] = []

    def redirect(self, path: str) -> None:
        logger.info(f"Redirecting to {path}")
        self.redirects.append(path)
        self.current_path = path

    def redirect_to_login(self) -> None:
        if self.current_path != LOGIN_PATH:
            self.redirect(LOGIN_PATH)
