"""mock-helper — shorthand configurations for building mock objects."""

from mock_helper.builder import MethodNotConfigurableError, MockBuilder, method
from mock_helper.config import (
    ConfigurationError,
    load_configuration,
    merge_configurations,
    normalize_configuration,
)
from mock_helper.context import MockContext, MockTestCase
from mock_helper.core import InvalidMockType, MockHelper, resolve_mock_method
from mock_helper.models import MethodNames, MockPlan, MockType

__version__ = "0.1.0"

__all__ = [
    "MockHelper",
    "MockBuilder",
    "MockContext",
    "MockTestCase",
    "MockPlan",
    "MockType",
    "MethodNames",
    "InvalidMockType",
    "ConfigurationError",
    "MethodNotConfigurableError",
    "load_configuration",
    "merge_configurations",
    "method",
    "normalize_configuration",
    "resolve_mock_method",
]
