"""Quickstart examples for mock-helper.

Run this file directly to verify your installation and see the helper in action:

    python examples/quickstart.py

Each demo function is self-contained and demonstrates a distinct feature.
"""

from __future__ import annotations

import abc

from mock_helper import (
    InvalidMockType,
    MockContext,
    MockHelper,
    normalize_configuration,
)


class PriceFeed:
    def __init__(self, url: str) -> None:
        raise RuntimeError(f"would connect to {url}")

    def price(self, symbol: str) -> float:
        raise RuntimeError("network access")

    def currency(self) -> str:
        return "USD"


class Cache(abc.ABC):
    @abc.abstractmethod
    def get(self, key: str) -> object:
        """Return the cached value for *key*."""

    def get_or(self, key: str, default: object) -> object:
        value = self.get(key)
        return default if value is None else value


# ---------------------------------------------------------------------------
# Demo 1: Methods shorthand — replace methods and set return values at once
# ---------------------------------------------------------------------------

def demo_methods_shorthand(helper: MockHelper) -> None:
    """Show the ``methods`` shorthand: list names, or map them to return values."""
    print("\n--- Demo 1: Methods Shorthand ---")

    # The original constructor is skipped by default, so no connection is made.
    feed = helper.mock_object(PriceFeed, {"methods": {"price": 195.5}})
    print(f"  price('AAPL') -> {feed.price('AAPL')}")
    print(f"  currency() keeps its real implementation -> {feed.currency()}")


# ---------------------------------------------------------------------------
# Demo 2: Actions — sequences, callables and exceptions
# ---------------------------------------------------------------------------

def demo_actions(helper: MockHelper) -> None:
    """Show ``will``: each stub gets a side effect."""
    print("\n--- Demo 2: Actions ---")

    feed = helper.mock_object(
        PriceFeed,
        {"will": {"price": [10.0, 11.0, RuntimeError("feed closed")]}},
    )
    for _ in range(3):
        try:
            print(f"  price -> {feed.price('AAPL')}")
        except RuntimeError as exc:
            print(f"  price raised: {exc}")


# ---------------------------------------------------------------------------
# Demo 3: Abstract classes and merged configurations
# ---------------------------------------------------------------------------

def demo_abstract_and_merge(helper: MockHelper) -> None:
    """Show ``mock_type`` and merging several configurations, later ones winning."""
    print("\n--- Demo 3: Abstract Class, Merged Configurations ---")

    shared = {"mock_type": "abstract", "will_return": {"get": "shared"}}
    local = {"will_return": {"get": None}}
    cache = helper.mock_object(Cache, shared, local)
    print(f"  get_or('k', 'fallback') -> {cache.get_or('k', 'fallback')}")
    print(f"  get called with: {cache.get.call_args}")


# ---------------------------------------------------------------------------
# Demo 4: Normalization and errors
# ---------------------------------------------------------------------------

def demo_normalization(helper: MockHelper) -> None:
    """Show the canonical form of a configuration and an invalid mock type."""
    print("\n--- Demo 4: Normalization ---")

    config = {"methods": ["currency", {"price": 1.0}], "constructor": False}
    print(f"  {config} ->")
    print(f"  {normalize_configuration(config)}")

    try:
        helper.mock_object(PriceFeed, {"mock_type": "interface"})
    except InvalidMockType as exc:
        print(f"  InvalidMockType: {exc}")


if __name__ == "__main__":
    mock_helper = MockHelper(MockContext())
    demo_methods_shorthand(mock_helper)
    demo_actions(mock_helper)
    demo_abstract_and_merge(mock_helper)
    demo_normalization(mock_helper)
