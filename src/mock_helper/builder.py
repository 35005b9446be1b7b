"""Staged mock builder over :mod:`unittest.mock`."""

from __future__ import annotations

import inspect
import itertools
import logging
from collections.abc import Iterable, Mapping
from typing import Any
from unittest.mock import Mock, NonCallableMock

logger = logging.getLogger(__name__)

# Class attribute on generated mock classes: names that may be stubbed,
# or None when any method may be.
_CONFIGURABLE_ATTR = "_mock_helper_methods"

_class_counter = itertools.count(1)


class MethodNotConfigurableError(AttributeError):
    """Raised when stubbing a method the mock was not built to replace."""


class MockBuilder:
    """Accumulate settings for one target class, then produce a mock of it.

    Args:
        target: The class, abstract base class or mixin to mock.
    """

    def __init__(self, target: type) -> None:
        if not inspect.isclass(target):
            raise TypeError(f"Cannot mock {target!r}: not a class")
        self._target = target
        self._methods: list[str] | None = []
        self._constructor_args: tuple[Any, ...] = ()
        self._constructor_kwargs: dict[str, Any] = {}
        self._mock_class_name: str | None = None
        self._call_original_constructor = True

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    def set_methods(self, methods: Iterable[str] | None) -> MockBuilder:
        """Replace *methods* on the mock; ``None`` lets any method be stubbed."""
        self._methods = None if methods is None else list(methods)
        return self

    def set_constructor_args(self, args: Iterable[Any] | Mapping[str, Any]) -> MockBuilder:
        """Arguments for the original constructor; a mapping is passed as keywords."""
        if isinstance(args, Mapping):
            self._constructor_args = ()
            self._constructor_kwargs = dict(args)
        else:
            self._constructor_args = tuple(args)
            self._constructor_kwargs = {}
        return self

    def set_mock_class_name(self, name: str) -> MockBuilder:
        """Name the generated mock class."""
        self._mock_class_name = name
        return self

    def disable_original_constructor(self) -> MockBuilder:
        """Skip the target's constructor when the mock is created."""
        self._call_original_constructor = False
        return self

    def enable_original_constructor(self) -> MockBuilder:
        """Call the target's constructor with the configured arguments."""
        self._call_original_constructor = True
        return self

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    def get_mock(self) -> Any:
        """Mock a concrete class, replacing only the configured methods."""
        return self._build(stub_abstract=False)

    def get_mock_for_abstract_class(self) -> Any:
        """Mock an abstract class; abstract methods are always replaced."""
        return self._build(stub_abstract=True)

    def get_mock_for_trait(self) -> Any:
        """Mock a mixin through a generated class that uses it."""
        return self._build(stub_abstract=True)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _build(self, stub_abstract: bool) -> Any:
        abstract = _abstract_methods(self._target)
        if stub_abstract:
            replaced = list(dict.fromkeys([*abstract, *(self._methods or [])]))
        else:
            replaced = list(dict.fromkeys(self._methods or []))

        class_name = self._mock_class_name or (
            f"Mock_{self._target.__name__}_{next(_class_counter)}"
        )
        namespace: dict[str, Any] = {
            _CONFIGURABLE_ATTR: None if self._methods is None else tuple(replaced),
            "__module__": self._target.__module__,
        }
        # Abstract methods must be overridden on the class for it to be instantiable.
        for name in replaced:
            if name in abstract:
                namespace[name] = _placeholder(name)

        mock_class = type(self._target)(class_name, (self._target,), namespace)
        if self._call_original_constructor:
            instance = mock_class(*self._constructor_args, **self._constructor_kwargs)
        else:
            instance = mock_class.__new__(mock_class)

        for name in replaced:
            setattr(instance, name, _new_stub(class_name, name))

        logger.debug(
            "Built %s for %s (replaced=%s, original constructor=%s)",
            class_name,
            self._target.__qualname__,
            replaced,
            self._call_original_constructor,
        )
        return instance


def _abstract_methods(target: type) -> list[str]:
    """Names of abstract methods, including those on mixins without ABCMeta."""
    names = set(getattr(target, "__abstractmethods__", ()))
    for name in dir(target):
        attr = inspect.getattr_static(target, name, None)
        if getattr(attr, "__isabstractmethod__", False):
            names.add(name)
    return sorted(names)


def _placeholder(name: str) -> Any:
    def placeholder(self: Any, *args: Any, **kwargs: Any) -> None:
        raise NotImplementedError(f"{name} is replaced on mock instances")

    placeholder.__name__ = name
    return placeholder


def _new_stub(class_name: str, name: str) -> Mock:
    return Mock(name=f"{class_name}.{name}", return_value=None)


def method(mock: Any, name: str) -> NonCallableMock:
    """Return the stub behind *name* on *mock*, creating it when allowed.

    Args:
        mock: A mock produced by :class:`MockBuilder` or any
            :mod:`unittest.mock` object.
        name: The method to stub.

    Raises:
        MethodNotConfigurableError: When *mock* was built with an explicit
            method list that does not include *name*, or without one and
            its class does not define *name*.
    """
    current = getattr(mock, name, None)
    if isinstance(current, NonCallableMock):
        return current

    configurable = getattr(type(mock), _CONFIGURABLE_ATTR, ())
    if configurable is None:
        if not hasattr(type(mock), name):
            raise MethodNotConfigurableError(
                f"Method '{name}' cannot be configured: "
                f"{type(mock).__name__} does not define it"
            )
        stub = _new_stub(type(mock).__name__, name)
        setattr(mock, name, stub)
        return stub

    raise MethodNotConfigurableError(
        f"Method '{name}' of {type(mock).__name__} cannot be configured: "
        "it was not listed in 'methods'"
    )


__all__ = [
    "MethodNotConfigurableError",
    "MockBuilder",
    "method",
]
