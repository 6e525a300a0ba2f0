# patternshowcase

A collection of small, self-contained examples of classic design patterns.
Each example runs a short scenario and prints what happens, so you can watch
the pattern at work.

| Module | Pattern | Scenario |
| --- | --- | --- |
| `patternshowcase.decorator` | Decorator | `EmailNotifier` wrapped by `SMSNotifier` and `SlackNotifier`; `with_logging` wraps a price calculator |
| `patternshowcase.singleton` | Singleton | `get_config()` creates a `Config` once and returns the same object afterwards |
| `patternshowcase.observer` | Observer | `EventManager` publishes events to `EmailNotifier` and `SlackNotifier` subscribers |
| `patternshowcase.strategy` | Strategy | `ShoppingCart` pays by `CreditCardPayment`, `PayPalPayment` or `BitcoinPayment` |
| `patternshowcase.builder` | Builder | `UserBuilder` builds a `User` fluently |
| `patternshowcase.factory_method` | Factory Method | `create_notifier` makes a notifier from a `NotifierType` |
| `patternshowcase.abstract_factory` | Abstract Factory | `AWSProvider` and `GCPProvider` create matching buckets and compute instances |
| `patternshowcase.facade` | Facade | `PaymentProcessor` drives validation, charging, receipts and auditing |

## Installation

```
pip install .
```

## Running the showcase

```
patternshowcase
```

This runs every example in turn, each under its own heading, in the order
Decorator, Singleton, Observer, Strategy, Builder, Factory Method,
Abstract Factory, Facade. The command takes no options apart from `--help`.

## Using the examples from Python

Every module has a `run()` function that plays its scenario. The classes
can also be used on their own:

```python
from patternshowcase.builder import UserBuilder
from patternshowcase.factory_method import NotifierType, create_notifier
from patternshowcase.strategy import ShoppingCart, PayPalPayment
from patternshowcase.facade import PaymentProcessor

user = UserBuilder("Jane Doe", "jane@example.com").with_phone("phone-0001").activate().build()

notifier = create_notifier(NotifierType.SMS)   # or create_notifier("sms")
notifier.send("Hello")

cart = ShoppingCart(amount=42.0, payment=PayPalPayment("jane@example.com"))
cart.checkout()

charged = PaymentProcessor().process("TEST-CARD-0001", "jane@example.com", 42.0)
```

Behaviour worth knowing:

- `create_notifier` raises `ValueError` for an unknown kind.
- `ShoppingCart.checkout` raises `RuntimeError` when no payment method is set.
- `PaymentProcessor.process` returns `False` (and prints "Invalid card") for an
  empty card number, and `True` once the card has been charged.
- `UserBuilder.build` returns a copy, so later builder calls do not change a
  `User` already built.
- A compute instance's `start()` prints and returns its status line.
- `EmailNotifier` and `SlackNotifier` in the observer module react only to the
  `"product:in_stock"` event with a string payload.

## What this package does not do

These are demonstrations. Nothing is actually sent, charged, uploaded or
started: notifiers, payment methods, cloud resources and the payment
processor only print what they would do. The configuration returned by
`get_config()` is fixed and is not read from a file or the environment.

## Running the tests

```
pip install ".[test]"
pytest
```