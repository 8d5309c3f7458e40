"""Error tree: named, ordered validation errors mirroring the document shape."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field


class ValidationContractError(RuntimeError):
    """Raised when a validator is assembled incorrectly.

    Not a validation outcome: it signals a bug in how a composite node
    adds its children, e.g. two entries under the same name.
    """

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        super().__init__(f"{message} (name='{name}')")


@dataclass(frozen=True)
class ValidationError:
    """A single human-readable violation."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class FieldErrors:
    """All violations attached to one scalar field."""

    errors: tuple[ValidationError, ...] = ()


@dataclass(frozen=True)
class EnumError:
    """A disallowed enum variant."""

    error: ValidationError


@dataclass(frozen=True)
class StructErrors:
    """Error subtree of a nested object."""

    errors: ValidationErrors


@dataclass(frozen=True)
class ListErrors:
    """Per-element error subtrees keyed by original list position (sparse)."""

    errors: dict[int, ValidationErrors] = field(default_factory=dict)


ValidationErrorsKind = FieldErrors | EnumError | StructErrors | ListErrors


class ValidationErrors:
    """Ordered mapping from field name to exactly one error kind.

    Insertion order is kept and drives iteration and display. Each name is
    written at most once per node, except that field errors accumulate
    under their existing ``FieldErrors`` entry.
    """

    __slots__ = ("_inner",)

    def __init__(self) -> None:
        self._inner: dict[str, ValidationErrorsKind] = {}

    # -- mutation ------------------------------------------------------------

    def add_field(self, name: str, error: ValidationError) -> None:
        """Append *error* to the field entry under *name*."""
        existing = self._inner.get(name)
        if existing is None:
            self._inner[name] = FieldErrors((error,))
        elif isinstance(existing, FieldErrors):
            self._inner[name] = FieldErrors(existing.errors + (error,))
        else:
            raise ValidationContractError(
                name, f"Cannot add a field error over a {type(existing).__name__} entry"
            )

    def add_enum(self, name: str, error: ValidationError) -> None:
        self._insert(name, EnumError(error))

    def add_struct(self, name: str, errors: ValidationErrors) -> None:
        self._insert(name, StructErrors(errors))

    def add_list(self, name: str, errors: Mapping[int, ValidationErrors]) -> None:
        """Insert per-element subtrees, stored in ascending index order."""
        if any(index < 0 for index in errors):
            raise ValidationContractError(name, "List error indices must be non-negative")
        self._insert(name, ListErrors({index: errors[index] for index in sorted(errors)}))

    def _insert(self, name: str, kind: ValidationErrorsKind) -> None:
        if name in self._inner:
            raise ValidationContractError(name, "Duplicate entry in validation errors")
        self._inner[name] = kind

    # -- queries -------------------------------------------------------------

    def contains_key(self, name: str) -> bool:
        return name in self._inner

    def is_empty(self) -> bool:
        return not self._inner

    def get(self, name: str) -> ValidationErrorsKind | None:
        return self._inner.get(name)

    def items(self) -> list[tuple[str, ValidationErrorsKind]]:
        return list(self._inner.items())

    def copy(self) -> ValidationErrors:
        """Shallow copy; kinds are immutable so entries can be shared."""
        clone = ValidationErrors()
        clone._inner = dict(self._inner)
        return clone

    def __contains__(self, name: object) -> bool:
        return name in self._inner

    def __getitem__(self, name: str) -> ValidationErrorsKind:
        return self._inner[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._inner)

    def __len__(self) -> int:
        return len(self._inner)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationErrors):
            return NotImplemented
        return list(self._inner.items()) == list(other._inner.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ValidationErrors({self._inner!r})"
