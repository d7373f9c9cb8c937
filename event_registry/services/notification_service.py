"""Fire-and-forget notifications about registration outcomes."""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from threading import Lock
from typing import Callable, List

from event_registry.models.participant import ParticipantID

logger = logging.getLogger(__name__)


class NotificationKind(str, Enum):
    """Notification emitted after a successful register_or_update call."""

    REGISTRATION_ATTEMPT = "RegistrationAttempt"
    REGISTRATION_UPDATE = "RegistrationUpdate"


@dataclass(frozen=True)
class Notification:
    """Outcome of a registration call, keyed by (caller, success, message)."""

    kind: NotificationKind
    caller: ParticipantID
    success: bool
    message: str
    emitted_at: str = field(
        default_factory=lambda: datetime.now().astimezone().isoformat()
    )  # ISO 8601 format


Listener = Callable[[Notification], None]


class Notifier:
    """
    Delivers notifications to subscribed listeners.

    Delivery runs outside the registry's write lock. A listener that raises
    is logged and skipped; it never affects the state change that produced
    the notification or the remaining listeners.
    """

    def __init__(self):
        self._listeners: List[Listener] = []
        self._lock = Lock()

    def subscribe(self, listener: Listener) -> None:
        with self._lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def publish(self, notification: Notification) -> int:
        """
        Deliver a notification to every listener.

        Args:
            notification: Notification to deliver

        Returns:
            Number of listeners that accepted it without raising
        """
        with self._lock:
            listeners = list(self._listeners)

        delivered = 0
        for listener in listeners:
            try:
                listener(notification)
                delivered += 1
            except Exception:
                logger.exception(
                    "Notification listener failed for %s (%s)",
                    notification.caller,
                    notification.kind.value,
                )
        return delivered


def log_notification(notification: Notification) -> None:
    """Listener that writes each notification to the application log."""
    logger.info(
        "%s caller=%s success=%s message=%s",
        notification.kind.value,
        notification.caller,
        notification.success,
        notification.message,
    )
