"""Command that runs every pattern demonstration in turn."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from patternshowcase import (
    abstract_factory,
    builder,
    decorator,
    facade,
    factory_method,
    observer,
    singleton,
    strategy,
)

SEPARATOR = "--------------------------"

DEMOS: list[tuple[str, Callable[[], None]]] = [
    ("Decorator", decorator.run),
    ("Singleton", singleton.run),
    ("Observer", observer.run),
    ("Strategy", strategy.run),
    ("Builder", builder.run),
    ("Factory Method", factory_method.run),
    ("Abstract Factory", abstract_factory.run),
    ("Facade", facade.run),
]


def main(argv: Sequence[str] | None = None) -> int:
    """Run all demonstrations, each under its own heading."""
    parser = argparse.ArgumentParser(
        prog="patternshowcase",
        description="Run demonstrations of common design patterns.",
    )
    parser.parse_args(argv)

    first = True
    for title, demo in DEMOS:
        prefix = "" if first else "\n"
        print(f"{prefix}{SEPARATOR}\n# {title}")
        demo()
        first = False
    return 0


if __name__ == "__main__":
    raise SystemExit(main())