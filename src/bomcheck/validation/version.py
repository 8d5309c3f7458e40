"""Document format versions and the validate capability shared by document nodes."""

from __future__ import annotations

from enum import StrEnum
from typing import Protocol, runtime_checkable

from bomcheck.validation.result import ValidationResult


class SpecVersion(StrEnum):
    V1_3 = "1.3"
    V1_4 = "1.4"
    V1_5 = "1.5"

    @property
    def ordinal(self) -> int:
        return list(SpecVersion).index(self)

    def __lt__(self, other: object) -> bool:
        if isinstance(other, SpecVersion):
            return self.ordinal < other.ordinal
        return NotImplemented

    def __le__(self, other: object) -> bool:
        if isinstance(other, SpecVersion):
            return self.ordinal <= other.ordinal
        return NotImplemented

    def __gt__(self, other: object) -> bool:
        if isinstance(other, SpecVersion):
            return self.ordinal > other.ordinal
        return NotImplemented

    def __ge__(self, other: object) -> bool:
        if isinstance(other, SpecVersion):
            return self.ordinal >= other.ordinal
        return NotImplemented


@runtime_checkable
class Validatable(Protocol):
    """A document node that validates itself against a format version."""

    def validate(self, version: SpecVersion) -> ValidationResult: ...
