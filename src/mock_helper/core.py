"""Core logic for mock-helper: mock-type resolution and the mock orchestrator."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from mock_helper.builder import method
from mock_helper.config import merge_configurations, normalize_configuration
from mock_helper.models import MockPlan, MockType

logger = logging.getLogger(__name__)


class InvalidMockType(ValueError):
    """Raised when a mock type outside ``default``/``abstract``/``trait`` is requested."""


_MOCK_TYPE_METHODS: dict[MockType, str] = {
    MockType.default: "get_mock",
    MockType.abstract: "get_mock_for_abstract_class",
    MockType.trait: "get_mock_for_trait",
}


def resolve_mock_method(mock_type: str | MockType) -> str:
    """Return the name of the builder factory method for *mock_type*.

    Raises:
        InvalidMockType: When *mock_type* is not a known mock type.
    """
    try:
        member = MockType(mock_type)
    except ValueError:
        raise InvalidMockType(
            f"Invalid mock type {mock_type!r}; expected one of "
            f"{[m.value for m in MockType]}"
        ) from None
    return _MOCK_TYPE_METHODS[member]


class SupportsMockBuilder(Protocol):
    """Anything that can hand out a mock builder for a class."""

    def get_mock_builder(self, target: type) -> Any: ...


class MockHelper:
    """Build configured mocks from shorthand configurations.

    Args:
        test_case: The test context whose ``get_mock_builder`` creates
            builders.

    Each configuration is a mapping. Keys are builder properties: ``foo``
    reaches the builder as ``set_foo(value)`` when the builder has such a
    method and is ignored otherwise. The special keys are:

    - ``methods``: method names to replace. An entry may also map a name to
      the value it should return, which is the same as listing it under
      ``will_return``.
    - ``will_return``: ``{method: value}``; the stub returns *value*.
    - ``will``: ``{method: action}``; the stub's ``side_effect``. A callable,
      an iterable of successive results, or an exception.
    - ``constructor``: ``False`` skips the original constructor. Ignored
      when ``disable_original_constructor`` is given. The constructor is
      skipped by default.
    - ``mock_type``: ``default``, ``abstract`` or ``trait``.

    Several configurations may be passed, e.g. gathered from different
    sources; they are merged with later ones winning.
    """

    def __init__(self, test_case: SupportsMockBuilder) -> None:
        self._test_case = test_case

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def plan(self, *configurations: Mapping[str, Any]) -> MockPlan:
        """Resolve *configurations* into a :class:`MockPlan` without building anything.

        Raises:
            InvalidMockType: When the merged ``mock_type`` is unknown.
        """
        config = merge_configurations(
            *(normalize_configuration(c) for c in configurations)
        )

        will_return = config.pop("will_return", {})
        will = config.pop("will", {})
        mock_type = config.pop("mock_type", MockType.default)
        factory_method = resolve_mock_method(mock_type)

        # Unrestricted methods for concrete classes; for abstract classes and
        # traits an empty list means only abstract methods are replaced.
        if not config.get("methods") and mock_type == MockType.default:
            config["methods"] = None

        return MockPlan(
            mock_type=MockType(mock_type),
            factory_method=factory_method,
            builder_options=config,
            disable_original_constructor=bool(
                config.get("disable_original_constructor", True)
            ),
            will_return=will_return,
            will=will,
        )

    def mock_object(self, target: type, *configurations: Mapping[str, Any]) -> Any:
        """Create a mock of *target* configured by *configurations*.

        Args:
            target: The class to mock.
            *configurations: Zero or more configuration mappings.

        Returns:
            The configured mock instance.

        Raises:
            InvalidMockType: When the merged ``mock_type`` is unknown.
        """
        plan = self.plan(*configurations)
        builder = self._test_case.get_mock_builder(target)

        for option, value in plan.builder_options.items():
            setter = getattr(builder, f"set_{option}", None)
            if callable(setter):
                setter(value)
            else:
                logger.debug(
                    "Ignoring option %r: %s has no set_%s",
                    option,
                    type(builder).__name__,
                    option,
                )

        if plan.disable_original_constructor:
            builder.disable_original_constructor()

        mock = getattr(builder, plan.factory_method)()

        for method_name, value in plan.will_return.items():
            method(mock, method_name).return_value = value

        for method_name, action in plan.will.items():
            method(mock, method_name).side_effect = action

        logger.debug(
            "Mocked %s via %s (%d return stubs, %d action stubs)",
            getattr(target, "__qualname__", target),
            plan.factory_method,
            len(plan.will_return),
            len(plan.will),
        )
        return mock


__all__ = [
    "InvalidMockType",
    "MockHelper",
    "SupportsMockBuilder",
    "resolve_mock_method",
]
