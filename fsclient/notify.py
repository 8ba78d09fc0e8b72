from __future__ import annotations

from typing import Protocol

from fsclient.logging_conf import get_logger

__all__ = ["Notifier", "LoggingNotifier"]

logger = get_logger("fsclient.notify")


class Notifier(Protocol):
    """Sink for user-visible messages (session expiry, server errors)."""

    def show(self, message: str) -> None: ...


class LoggingNotifier:
    """Default notifier for headless use: one WARNING record per message."""

    def show(self, message: str) -> None:
        logger.warning(
            "notify.user",
            extra={"event": "user_notification", "user_message": message},
        )
