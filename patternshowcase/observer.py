"""Observer pattern: an event manager that notifies subscribed observers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import defaultdict
from dataclasses import dataclass
from typing import Any

IN_STOCK_EVENT = "product:in_stock"


class Observer(ABC):
    """A subscriber that responds to events."""

    @abstractmethod
    def on_event(self, event: str, payload: Any) -> None:
        """Handle an event published to this observer."""


class EventManager:
    """Keeps track of subscriptions and publishes events to them."""

    def __init__(self) -> None:
        self._subscribers: defaultdict[str, list[Observer]] = defaultdict(list)

    def subscribe(self, event: str, observer: Observer) -> None:
        """Add an observer to the given event."""
        self._subscribers[event].append(observer)

    def publish(self, event: str, payload: Any) -> None:
        """Deliver the event to every observer subscribed to it, in order."""
        for observer in self._subscribers.get(event, ()):
            observer.on_event(event, payload)


@dataclass
class EmailNotifier(Observer):
    """Observer that sends e-mail notifications."""

    email_address: str

    def on_event(self, event: str, payload: Any) -> None:
        if event == IN_STOCK_EVENT and isinstance(payload, str):
            print(f"[Email to {self.email_address}] Event: {event} -> {payload} is available!")


@dataclass
class SlackNotifier(Observer):
    """Observer that posts notifications to a Slack channel."""

    channel: str

    def on_event(self, event: str, payload: Any) -> None:
        if event == IN_STOCK_EVENT and isinstance(payload, str):
            print(f"[Slack #{self.channel}] Event: {event} -> {payload} is available!")


def run() -> None:
    """Demonstrate the Observer pattern."""
    manager = EventManager()
    manager.subscribe(IN_STOCK_EVENT, EmailNotifier("alerts@example.com"))
    manager.subscribe(IN_STOCK_EVENT, SlackNotifier("stock-updates"))
    manager.publish(IN_STOCK_EVENT, "Product")