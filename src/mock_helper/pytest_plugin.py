"""Pytest plugin providing the ``mock_helper`` fixture."""

from __future__ import annotations

import pytest

from mock_helper.context import MockContext
from mock_helper.core import MockHelper


@pytest.fixture()
def mock_context() -> MockContext:
    """Test context handing out mock builders."""
    return MockContext()


@pytest.fixture()
def mock_helper(mock_context: MockContext) -> MockHelper:
    """A :class:`MockHelper` bound to :func:`mock_context`."""
    return MockHelper(mock_context)
