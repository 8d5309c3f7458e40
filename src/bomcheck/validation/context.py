"""Fluent builder that accumulates child outcomes for one document node."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Sequence
from typing import Any, Self, TypeVar

from bomcheck.validation.errors import ValidationContractError, ValidationError
from bomcheck.validation.result import (
    ValidationResult,
    merge_enum,
    merge_field,
    merge_list,
    merge_struct,
)
from bomcheck.validation.version import SpecVersion, Validatable

T = TypeVar("T")

Predicate = Callable[[T], ValidationError | None]
Validator = Callable[[T], ValidationResult]


class ValidationContext:
    """Accumulates a ``ValidationResult`` across field, struct, list and enum checks.

    ``None`` values are absent optional fields: no check runs and nothing is
    recorded. The accumulated result is only readable through
    :meth:`into_result`, which consumes the context.

    Example::

        return (
            ValidationContext(version)
            .add_field("serialNumber", self.serial_number, validate_serial_number)
            .add_struct("metadata", self.metadata)
            .into_result()
        )
    """

    def __init__(self, version: SpecVersion | None = None) -> None:
        self._version = version
        self._result: ValidationResult | None = ValidationResult.ok()

    def add_field(self, name: str, value: T | None, predicate: Predicate[T]) -> Self:
        """Run *predicate* on a present scalar value."""
        result = self._current(name)
        if value is not None:
            self._result = merge_field(result, name, predicate(value))
        return self

    def add_enum(self, name: str, value: T | None, predicate: Predicate[T]) -> Self:
        """Run *predicate* on a present enum value; at most once per name."""
        result = self._current(name)
        if value is not None:
            self._result = merge_enum(result, name, predicate(value))
        return self

    def add_struct(
        self, name: str, child: T | None, validator: Validator[T] | None = None
    ) -> Self:
        """Validate a present nested object and attach its tree under *name*.

        Without *validator* the child's own ``validate`` is called with the
        context's version.
        """
        result = self._current(name)
        if child is not None:
            self._result = merge_struct(result, name, self._run(name, child, validator))
        return self

    def add_list(
        self, name: str, items: Sequence[T] | None, validator: Validator[T] | None = None
    ) -> Self:
        """Validate every element of a present sequence, keyed by position."""
        result = self._current(name)
        if items is not None:
            outcomes = [self._run(name, item, validator) for item in items]
            self._result = merge_list(result, name, outcomes)
        return self

    def into_result(self) -> ValidationResult:
        """Finish the context and return the accumulated result."""
        result = self._current("<result>")
        self._result = None
        return result

    # -- internals -----------------------------------------------------------

    def _current(self, name: str) -> ValidationResult:
        if self._result is None:
            raise ValidationContractError(name, "Validation context already converted to a result")
        return self._result

    def _run(self, name: str, child: Any, validator: Validator[Any] | None) -> ValidationResult:
        if validator is not None:
            return validator(child)
        if self._version is None:
            raise ValidationContractError(name, "No validator given and context has no version")
        # pydantic's BaseModel.validate is a classmethod; only an instance
        # method counts.
        if not isinstance(child, Validatable) or isinstance(
            inspect.getattr_static(type(child), "validate", None), (classmethod, staticmethod)
        ):
            raise ValidationContractError(
                name, f"{type(child).__name__} does not implement validate(version)"
            )
        return child.validate(self._version)
