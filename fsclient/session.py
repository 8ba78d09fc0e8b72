"""Debounced session-expiry notification.

A burst of 401/403 responses (e.g. several requests failing at once after the
token expired) must produce exactly one prompt. The monitor arms a one-shot
timer on the first failure and ignores further triggers until it fires.
"""
from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

from fsclient.logging_conf import get_logger
from fsclient.notify import Notifier

__all__ = ["SESSION_EXPIRED_MESSAGE", "Scheduler", "SessionMonitor", "loop_scheduler"]

logger = get_logger("fsclient.session")

SESSION_EXPIRED_MESSAGE = "Your session has expired, please re-login."

# schedule(delay_seconds, callback) -> handle
Scheduler = Callable[[float, Callable[[], None]], Any]


def loop_scheduler(delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
    """Schedule on the running event loop; must be called from inside it."""
    return asyncio.get_running_loop().call_later(delay, callback)


class SessionMonitor:
    """Two states: idle, or a notification armed and waiting on its timer.

    There is no cancel; the only way back to idle is the timer firing.
    """

    def __init__(
        self,
        notifier: Notifier,
        *,
        delay_s: float = 0.5,
        schedule: Scheduler = loop_scheduler,
    ) -> None:
        self._notifier = notifier
        self._delay_s = delay_s
        self._schedule = schedule
        self._armed = False
        self._handle: Any = None

    @property
    def armed(self) -> bool:
        return self._armed

    def trigger(self) -> None:
        """Record an authorization failure; arms the timer if idle.

        Check and arm happen in the same synchronous step, so concurrent
        callbacks on one event loop cannot both arm.
        """
        if self._armed:
            logger.debug("session.debounced", extra={"event": "session_debounced"})
            return
        self._armed = True
        self._handle = self._schedule(self._delay_s, self._fire)
        logger.info(
            "session.armed",
            extra={"event": "session_armed", "delay_s": self._delay_s},
        )

    def _fire(self) -> None:
        try:
            self._notifier.show(SESSION_EXPIRED_MESSAGE)
        finally:
            self._armed = False
            self._handle = None
        logger.info("session.notified", extra={"event": "session_notified"})
