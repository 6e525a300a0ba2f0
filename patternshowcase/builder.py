"""Builder pattern: a fluent builder for user records."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass
class User:
    """A user with optional contact details and status."""

    name: str
    email_address: str
    phone_number: str = ""
    is_active: bool = False


class UserBuilder:
    """Fluent builder for :class:`User`."""

    def __init__(self, name: str, email: str) -> None:
        self._user = User(name=name, email_address=email)

    def with_phone(self, phone: str) -> UserBuilder:
        """Set the user's phone number."""
        self._user.phone_number = phone
        return self

    def activate(self) -> UserBuilder:
        """Mark the user as active."""
        self._user.is_active = True
        return self

    def build(self) -> User:
        """Return a copy of the user built so far."""
        return replace(self._user)


def run() -> None:
    """Demonstrate the Builder pattern."""
    user = (
        UserBuilder("John Smith", "john@example.com")
        .with_phone("phone-0001")
        .activate()
        .build()
    )
    print(f"User built: {user}")