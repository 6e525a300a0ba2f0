"""Strategy pattern: a shopping cart paying through interchangeable methods."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class PaymentMethod(ABC):
    """A way of paying an amount."""

    @abstractmethod
    def pay(self, amount: float) -> None:
        """Pay the given amount."""


@dataclass
class CreditCardPayment(PaymentMethod):
    """Pays with a credit card."""

    name: str
    card_number: str

    def pay(self, amount: float) -> None:
        print(f"Paid {amount:.2f} using Credit Card [{self.card_number}]")


@dataclass
class PayPalPayment(PaymentMethod):
    """Pays through a PayPal account."""

    email_address: str

    def pay(self, amount: float) -> None:
        print(f"Paid {amount:.2f} using PayPal [{self.email_address}]")


@dataclass
class BitcoinPayment(PaymentMethod):
    """Pays from a Bitcoin wallet."""

    wallet_address: str

    def pay(self, amount: float) -> None:
        print(f"Paid {amount:.2f} using Bitcoin Wallet [{self.wallet_address}]")


@dataclass
class ShoppingCart:
    """The context that delegates payment to its current strategy."""

    amount: float
    payment: PaymentMethod | None = None

    def checkout(self) -> None:
        """Pay the cart's amount with the selected payment method."""
        if self.payment is None:
            raise RuntimeError("no payment method selected")
        self.payment.pay(self.amount)


def run() -> None:
    """Demonstrate the Strategy pattern."""
    cart = ShoppingCart(amount=150.00)

    cart.payment = CreditCardPayment(name="John Smith", card_number="TEST-CARD-0001")
    cart.checkout()

    cart.payment = PayPalPayment(email_address="buyer@example.com")
    cart.checkout()

    cart.payment = BitcoinPayment(wallet_address="1A2B3C4D5E6F")
    cart.checkout()