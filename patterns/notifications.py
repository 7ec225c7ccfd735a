"""Lookup-by-type dispatch pattern: notification delivery.

A dispatcher holds one notifier per payload type and routes each payload to
its notifier. Notifiers may be plain or async; the dispatcher awaits when
needed. Same registry idea as ``discount_engine.service``, without business
rules on top.
"""
from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Iterable

import structlog

log = structlog.get_logger(__name__)


class NotificationType(str, Enum):
    EMAIL = "email"
    SMS = "sms"


# ---------------------------------------------------------------------------
# Payloads
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Notification:
    content: str
    notification_type: ClassVar[NotificationType]


@dataclass(frozen=True)
class EmailNotification(Notification):
    notification_type = NotificationType.EMAIL


@dataclass(frozen=True)
class SmsNotification(Notification):
    notification_type = NotificationType.SMS


# ---------------------------------------------------------------------------
# Notifiers
# ---------------------------------------------------------------------------

class Notifier(ABC):
    """Delivers one payload type."""

    payload_type: ClassVar[type[Notification]]

    @abstractmethod
    def send(self, payload: Notification) -> dict[str, Any]:
        """Deliver ``payload`` and return a delivery receipt."""


class EmailNotifier(Notifier):
    payload_type = EmailNotification

    def send(self, payload: EmailNotification) -> dict[str, Any]:
        log.info("email_sent", content=payload.content)
        return {"channel": NotificationType.EMAIL.value, "content": payload.content}


class SmsNotifier(Notifier):
    payload_type = SmsNotification

    def send(self, payload: SmsNotification) -> dict[str, Any]:
        log.info("sms_sent", content=payload.content)
        return {"channel": NotificationType.SMS.value, "content": payload.content}


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------

class DuplicateNotifierError(ValueError):
    """Two notifiers registered for the same payload type."""


class NotifierNotFoundError(LookupError):
    """No notifier registered for a payload type."""


class NotificationDispatcher:
    """Routes each payload to the notifier registered for its type."""

    def __init__(self, notifiers: Iterable[Notifier]):
        self._notifiers: dict[type[Notification], Notifier] = {}
        for notifier in notifiers:
            if notifier.payload_type in self._notifiers:
                raise DuplicateNotifierError(
                    f"Duplicate notifier for payload type: {notifier.payload_type.__name__}"
                )
            self._notifiers[notifier.payload_type] = notifier

    def notifier_for(self, payload: Notification) -> Notifier:
        notifier = self._notifiers.get(type(payload))
        if notifier is None:
            raise NotifierNotFoundError(
                f"No notifier found for type: {type(payload).__name__}"
            )
        return notifier

    async def send(self, payload: Notification) -> dict[str, Any]:
        """Deliver one payload."""
        notifier = self.notifier_for(payload)
        if inspect.iscoroutinefunction(notifier.send):
            return await notifier.send(payload)
        return notifier.send(payload)

    async def send_all(self, payloads: Iterable[Notification]) -> list[dict[str, Any]]:
        """Deliver payloads in order, stopping at the first failure."""
        return [await self.send(payload) for payload in payloads]

    @property
    def notifier_count(self) -> int:
        return len(self._notifiers)
