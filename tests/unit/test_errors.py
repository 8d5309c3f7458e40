"""Tests for the error tree."""

from __future__ import annotations

import pytest

from bomcheck.validation import (
    EnumError,
    FieldErrors,
    ListErrors,
    StructErrors,
    ValidationContractError,
    ValidationError,
    ValidationErrors,
)


def _tree_with_field(name: str, message: str) -> ValidationErrors:
    errors = ValidationErrors()
    errors.add_field(name, ValidationError(message))
    return errors


class TestValidationError:
    def test_str_is_message(self) -> None:
        assert str(ValidationError("missing")) == "missing"

    def test_structural_equality(self) -> None:
        assert ValidationError("a") == ValidationError("a")
        assert ValidationError("a") != ValidationError("b")


class TestQueries:
    def test_new_tree_is_empty(self) -> None:
        errors = ValidationErrors()
        assert errors.is_empty()
        assert len(errors) == 0

    def test_is_empty_after_add(self) -> None:
        errors = ValidationErrors()
        errors.add_field("hello", ValidationError("again"))
        assert not errors.is_empty()

    def test_contains_key(self) -> None:
        errors = _tree_with_field("test", "missing")
        assert errors.contains_key("test")
        assert not errors.contains_key("haha")
        assert "test" in errors

    def test_get_missing_returns_none(self) -> None:
        assert ValidationErrors().get("nope") is None


class TestAddField:
    def test_first_error_creates_field_entry(self) -> None:
        errors = _tree_with_field("email", "email unknown")
        assert errors["email"] == FieldErrors((ValidationError("email unknown"),))

    def test_errors_accumulate_in_order(self) -> None:
        errors = ValidationErrors()
        errors.add_field("phone", ValidationError("too short"))
        errors.add_field("phone", ValidationError("bad prefix"))
        kind = errors["phone"]
        assert isinstance(kind, FieldErrors)
        assert [e.message for e in kind.errors] == ["too short", "bad prefix"]
        assert len(errors) == 1

    def test_field_over_enum_is_contract_violation(self) -> None:
        errors = ValidationErrors()
        errors.add_enum("kind", ValidationError("disallowed"))
        with pytest.raises(ValidationContractError, match="kind"):
            errors.add_field("kind", ValidationError("other"))


class TestUniqueness:
    def test_duplicate_enum_rejected(self) -> None:
        errors = ValidationErrors()
        errors.add_enum("kind", ValidationError("first"))
        with pytest.raises(ValidationContractError) as exc_info:
            errors.add_enum("kind", ValidationError("second"))
        assert exc_info.value.name == "kind"
        assert errors["kind"] == EnumError(ValidationError("first"))

    def test_duplicate_struct_rejected(self) -> None:
        errors = ValidationErrors()
        errors.add_struct("metadata", _tree_with_field("timestamp", "bad"))
        with pytest.raises(ValidationContractError):
            errors.add_struct("metadata", _tree_with_field("timestamp", "bad"))

    def test_list_over_field_rejected(self) -> None:
        errors = _tree_with_field("tools", "bad")
        with pytest.raises(ValidationContractError):
            errors.add_list("tools", {0: _tree_with_field("name", "bad")})

    def test_contract_error_is_not_a_validation_error(self) -> None:
        assert not issubclass(ValidationContractError, ValueError)
        assert issubclass(ValidationContractError, RuntimeError)


class TestAddList:
    def test_indices_stored_ascending(self) -> None:
        errors = ValidationErrors()
        errors.add_list(
            "tools",
            {2: _tree_with_field("name", "c"), 0: _tree_with_field("name", "a")},
        )
        kind = errors["tools"]
        assert isinstance(kind, ListErrors)
        assert list(kind.errors) == [0, 2]

    def test_negative_index_rejected(self) -> None:
        with pytest.raises(ValidationContractError):
            ValidationErrors().add_list("tools", {-1: _tree_with_field("name", "a")})


class TestOrderingAndEquality:
    def test_iteration_follows_insertion_order(self) -> None:
        errors = ValidationErrors()
        errors.add_field("zeta", ValidationError("z"))
        errors.add_enum("alpha", ValidationError("a"))
        errors.add_struct("mid", _tree_with_field("x", "x"))
        assert list(errors) == ["zeta", "alpha", "mid"]

    def test_equal_trees(self) -> None:
        left = ValidationErrors()
        left.add_struct("metadata", _tree_with_field("timestamp", "bad"))
        right = ValidationErrors()
        right.add_struct("metadata", _tree_with_field("timestamp", "bad"))
        assert left == right
        assert left["metadata"] == StructErrors(_tree_with_field("timestamp", "bad"))

    def test_order_is_significant_for_equality(self) -> None:
        left = ValidationErrors()
        left.add_field("a", ValidationError("1"))
        left.add_field("b", ValidationError("2"))
        right = ValidationErrors()
        right.add_field("b", ValidationError("2"))
        right.add_field("a", ValidationError("1"))
        assert left != right
        assert dict(left.items()) == dict(right.items())

    def test_copy_is_independent(self) -> None:
        original = _tree_with_field("a", "1")
        clone = original.copy()
        clone.add_field("a", ValidationError("2"))
        clone.add_enum("b", ValidationError("3"))
        assert original == _tree_with_field("a", "1")
        assert len(clone) == 2
