"""Facade pattern: one payment processor in front of several subsystems."""

from __future__ import annotations

from dataclasses import dataclass, field


class CardValidator:
    """Checks card numbers."""

    def validate(self, card_number: str) -> bool:
        """Return whether the card number is usable."""
        print("Validating card:", card_number)
        return card_number != ""


class PaymentGateway:
    """Charges cards."""

    def charge(self, card_number: str, amount: float) -> None:
        print(f"Charging {amount:.2f} to card {card_number}")


class NotificationService:
    """Sends receipts."""

    def send_receipt(self, email_address: str, amount: float) -> None:
        print(f"Sending receipt to {email_address} for amount ${amount:.2f}")


class AuditLog:
    """Records transactions."""

    def record(self, transaction: str) -> None:
        print("Audit log:", transaction)


@dataclass
class PaymentProcessor:
    """Runs a whole payment through the subsystems with one call."""

    validator: CardValidator = field(default_factory=CardValidator)
    gateway: PaymentGateway = field(default_factory=PaymentGateway)
    notifier: NotificationService = field(default_factory=NotificationService)
    logger: AuditLog = field(default_factory=AuditLog)

    def process(self, card: str, email_address: str, amount: float) -> bool:
        """Validate, charge, send a receipt and log; return whether it was charged."""
        if not self.validator.validate(card):
            print("Invalid card")
            return False

        self.gateway.charge(card, amount)
        self.notifier.send_receipt(email_address, amount)
        self.logger.record(f"Charged {card} for ${amount:.2f}")
        return True


def run() -> None:
    """Demonstrate the Facade pattern."""
    PaymentProcessor().process("TEST-CARD-0001", "buyer@example.com", 150.00)