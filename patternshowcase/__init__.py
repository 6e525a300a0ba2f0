"""Runnable examples of classic design patterns, with a command that runs them all."""

__version__ = "0.1.0"

__all__ = [
    "abstract_factory",
    "builder",
    "cli",
    "decorator",
    "facade",
    "factory_method",
    "observer",
    "singleton",
    "strategy",
]