"""Shared pytest fixtures for mock-helper tests."""

from __future__ import annotations

import abc
import json
from pathlib import Path
from typing import Any

import pytest
import yaml

from mock_helper.context import MockContext
from mock_helper.core import MockHelper


# ---------------------------------------------------------------------------
# Classes to mock
# ---------------------------------------------------------------------------


class Greeter:
    """A concrete class whose constructor records that it ran."""

    def __init__(self, name: str = "world") -> None:
        self.name = name
        self.constructed = True

    def greet(self) -> str:
        return f"Hello, {self.name}!"

    def farewell(self) -> str:
        return f"Goodbye, {self.name}!"


class Repository(abc.ABC):
    """An abstract class with one abstract and one concrete method."""

    @abc.abstractmethod
    def find(self, key: str) -> Any:
        """Look up *key*."""

    def describe(self) -> str:
        return "repository"


class TimestampMixin:
    """A mixin relying on an abstract ``now`` supplied by its host."""

    @abc.abstractmethod
    def now(self) -> float:
        """Current time."""

    def stamp(self, label: str) -> str:
        return f"{label}@{self.now()}"


# ---------------------------------------------------------------------------
# Helper fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def context() -> MockContext:
    """A plain test context."""
    return MockContext()


@pytest.fixture()
def helper(context: MockContext) -> MockHelper:
    """A MockHelper bound to a plain test context."""
    return MockHelper(context)


# ---------------------------------------------------------------------------
# File-based config fixtures (YAML & JSON)
# ---------------------------------------------------------------------------


def _config_dict() -> dict[str, Any]:
    """Return a raw dict representing a file-based configuration."""
    return {
        "methods": ["greet", {"farewell": "bye"}],
        "will": {"greet": ["first", "second"]},
        "constructor": False,
    }


@pytest.fixture()
def yaml_config_file(tmp_path: Path) -> Path:
    """A temporary YAML config file."""
    config_path = tmp_path / "greeter.yaml"
    config_path.write_text(
        yaml.dump(_config_dict(), default_flow_style=False),
        encoding="utf-8",
    )
    return config_path


@pytest.fixture()
def json_config_file(tmp_path: Path) -> Path:
    """A temporary JSON config file."""
    config_path = tmp_path / "greeter.json"
    config_path.write_text(json.dumps(_config_dict()), encoding="utf-8")
    return config_path


@pytest.fixture()
def greeter_cls() -> type[Greeter]:
    return Greeter


@pytest.fixture()
def repository_cls() -> type[Repository]:
    return Repository


@pytest.fixture()
def mixin_cls() -> type[TimestampMixin]:
    return TimestampMixin
