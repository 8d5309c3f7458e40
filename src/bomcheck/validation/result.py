"""Validation results and the merge algebra that lifts child outcomes into a parent."""

from __future__ import annotations

from collections.abc import Iterable

from bomcheck.validation.errors import ValidationError, ValidationErrors


class ValidationResult:
    """Either passed (no tree) or failed with a non-empty error tree.

    A result built from an empty tree is a passed result; the two states are
    indistinguishable.
    """

    __slots__ = ("_errors",)

    def __init__(self, errors: ValidationErrors | None = None) -> None:
        self._errors = None if errors is None or errors.is_empty() else errors

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls()

    @classmethod
    def failed(cls, errors: ValidationErrors) -> ValidationResult:
        return cls(errors)

    def passed(self) -> bool:
        return self._errors is None

    def has_errors(self) -> bool:
        return self._errors is not None

    def errors(self) -> ValidationErrors | None:
        return self._errors

    def has_error(self, name: str) -> bool:
        """True if the top level of the tree has an entry for *name*."""
        return self._errors is not None and self._errors.contains_key(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationResult):
            return NotImplemented
        return self._errors == other._errors

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._errors is None:
            return "ValidationResult(passed)"
        return f"ValidationResult(failed={self._errors!r})"


def _failed_copy(parent: ValidationResult) -> ValidationErrors:
    errors = parent.errors()
    return ValidationErrors() if errors is None else errors.copy()


def merge_field(
    parent: ValidationResult, name: str, outcome: ValidationError | None
) -> ValidationResult:
    """Record a failed field check under *name*; a pass leaves *parent* as is."""
    if outcome is None:
        return parent
    errors = _failed_copy(parent)
    errors.add_field(name, outcome)
    return ValidationResult(errors)


def merge_enum(
    parent: ValidationResult, name: str, outcome: ValidationError | None
) -> ValidationResult:
    """Record a disallowed enum variant under *name*."""
    if outcome is None:
        return parent
    errors = _failed_copy(parent)
    errors.add_enum(name, outcome)
    return ValidationResult(errors)


def merge_struct(
    parent: ValidationResult, name: str, child: ValidationResult
) -> ValidationResult:
    """Attach a failed child's whole tree under *name*, unflattened."""
    child_errors = child.errors()
    if child_errors is None:
        return parent
    errors = _failed_copy(parent)
    errors.add_struct(name, child_errors)
    return ValidationResult(errors)


def merge_list(
    parent: ValidationResult, name: str, children: Iterable[ValidationResult]
) -> ValidationResult:
    """Attach failed children keyed by their original position."""
    failed: dict[int, ValidationErrors] = {}
    for index, child in enumerate(children):
        child_errors = child.errors()
        if child_errors is not None:
            failed[index] = child_errors
    if not failed:
        return parent
    errors = _failed_copy(parent)
    errors.add_list(name, failed)
    return ValidationResult(errors)
