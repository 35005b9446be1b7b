"""Test contexts that hand out :class:`MockBuilder` instances."""

from __future__ import annotations

import unittest
from collections.abc import Mapping
from typing import Any

from mock_helper.builder import MockBuilder
from mock_helper.core import MockHelper


class MockContext:
    """Plain test context for code that is not a :class:`unittest.TestCase`."""

    def get_mock_builder(self, target: type) -> MockBuilder:
        """Return a new builder for *target*."""
        return MockBuilder(target)


class MockTestCase(unittest.TestCase):
    """``unittest`` base class with ``mock_object`` shorthand.

    Usage::

        class GreeterTest(MockTestCase):
            def test_greets(self):
                greeter = self.mock_object(Greeter, {"methods": {"greet": "hi"}})
                self.assertEqual(greeter.greet(), "hi")
    """

    def get_mock_builder(self, target: type) -> MockBuilder:
        """Return a new builder for *target*."""
        return MockBuilder(target)

    def mock_object(self, target: type, *configurations: Mapping[str, Any]) -> Any:
        """Create a mock of *target*; see :class:`MockHelper`."""
        return MockHelper(self).mock_object(target, *configurations)


__all__ = [
    "MockContext",
    "MockTestCase",
]
