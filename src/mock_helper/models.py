"""Pydantic models for mock-helper."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class MockType(str, Enum):
    """Selects which builder factory produces the mock."""

    default = "default"    # Concrete class
    abstract = "abstract"  # Abstract base class
    trait = "trait"        # Mixin used through a generated class


class MethodNames(dict):
    """Canonical ``methods`` value: each method name mapped to itself.

    Normalization leaves values of this type untouched, which keeps it
    idempotent.
    """

    @classmethod
    def of(cls, names: Any) -> MethodNames:
        return cls((name, name) for name in names)


class MockPlan(BaseModel):
    """Everything needed to build one mock, resolved from merged configurations."""

    mock_type: MockType = Field(
        default=MockType.default, description="Mock construction variant"
    )
    factory_method: str = Field(
        description="Builder method that produces the mock instance"
    )
    builder_options: dict[str, Any] = Field(
        default_factory=dict,
        description="Options dispatched to the builder's set_<option> methods",
    )
    disable_original_constructor: bool = Field(
        default=True, description="Skip the target's own constructor"
    )
    will_return: dict[str, Any] = Field(
        default_factory=dict, description="Method name to canned return value"
    )
    will: dict[str, Any] = Field(
        default_factory=dict,
        description="Method name to stub action (callable, iterable or exception)",
    )

    @field_validator("factory_method")
    @classmethod
    def factory_method_must_not_be_empty(cls, value: str) -> str:
        """Ensure a factory method was resolved."""
        if not value.strip():
            raise ValueError("factory_method must not be empty")
        return value

    @property
    def methods(self) -> Any:
        """Return the ``methods`` option that will reach the builder."""
        return self.builder_options.get("methods")


__all__ = [
    "MethodNames",
    "MockPlan",
    "MockType",
]
