"""Singleton pattern: a lazily created, process-wide configuration."""

from __future__ import annotations

import threading
from dataclasses import dataclass


@dataclass
class Config:
    """Application configuration."""

    app_name: str
    port: int
    debug_mode: bool


_instance: Config | None = None
_lock = threading.Lock()


def get_config() -> Config:
    """Return the single shared configuration, creating it on first use."""
    global _instance
    if _instance is None:
        with _lock:
            if _instance is None:
                print("Load configuration")
                _instance = Config(app_name="Sample App", port=8080, debug_mode=True)
    return _instance


def run() -> None:
    """Demonstrate the Singleton pattern."""
    cfg1 = get_config()
    print(f"Config 1: {cfg1}")

    cfg2 = get_config()
    print(f"Config 2: {cfg2}")
    print("Same instance?", cfg1 is cfg2)