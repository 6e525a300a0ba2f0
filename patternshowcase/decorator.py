"""Decorator pattern: stacked notifiers and a logging wrapper for calculators."""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

PriceCalculator = Callable[[float], float]


def _format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


class Notifier(ABC):
    """A component that can send a message."""

    @abstractmethod
    def send(self, message: str) -> None:
        """Send the message."""


class EmailNotifier(Notifier):
    """The base component; always sends by e-mail."""

    def send(self, message: str) -> None:
        print("[Email]: ", message)


@dataclass
class SMSNotifier(Notifier):
    """Adds an SMS to whatever the wrapped notifier sends."""

    notifier: Notifier

    def send(self, message: str) -> None:
        self.notifier.send(message)
        print("[SMS]: ", message)


@dataclass
class SlackNotifier(Notifier):
    """Adds a Slack message to whatever the wrapped notifier sends."""

    notifier: Notifier

    def send(self, message: str) -> None:
        self.notifier.send(message)
        print("[Slack]: ", message)


def with_logging(calculator: PriceCalculator) -> PriceCalculator:
    """Wrap a price calculator so it logs its input and result."""

    @functools.wraps(calculator)
    def wrapper(price: float) -> float:
        print("Starting price calculation: ", _format_number(price))
        result = calculator(price)
        print("Ending price calculation: ", _format_number(result))
        return result

    return wrapper


def run() -> None:
    """Demonstrate the Decorator pattern."""
    print("\n## OOP-style decorator")
    notifier: Notifier = EmailNotifier()
    notifier = SMSNotifier(notifier)
    notifier = SlackNotifier(notifier)
    notifier.send("This is my message.")

    print("\n## Function-based decorator")
    result = with_logging(lambda price: price)(100.0)
    print("Result: ", _format_number(result))