"""Factory Method pattern: create notifiers by type."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class Notifier(ABC):
    """Something that can send a message."""

    @abstractmethod
    def send(self, message: str) -> None:
        """Send the message."""


class EmailNotifier(Notifier):
    def send(self, message: str) -> None:
        print("[Email]: ", message)


class SMSNotifier(Notifier):
    def send(self, message: str) -> None:
        print("[SMS]: ", message)


class NotifierType(str, Enum):
    """Kinds of notifier the factory can create."""

    EMAIL = "email"
    SMS = "sms"

    def __str__(self) -> str:
        return self.value


_NOTIFIERS: dict[NotifierType, type[Notifier]] = {
    NotifierType.EMAIL: EmailNotifier,
    NotifierType.SMS: SMSNotifier,
}


def create_notifier(kind: NotifierType | str) -> Notifier:
    """Create a notifier of the given kind; raise ValueError for unknown kinds."""
    try:
        notifier_type = NotifierType(kind)
    except ValueError:
        raise ValueError(f"unknown notifier type: {kind}") from None
    return _NOTIFIERS[notifier_type]()


def run() -> None:
    """Demonstrate the Factory Method pattern."""
    email_notifier = create_notifier(NotifierType.EMAIL)
    sms_notifier = create_notifier(NotifierType.SMS)

    email_notifier.send("Message sent via email.")
    sms_notifier.send("Message sent via SMS.")