"""Error-accumulating validation engine: error tree, merge algebra and context builder."""

from bomcheck.validation.context import ValidationContext
from bomcheck.validation.errors import (
    EnumError,
    FieldErrors,
    ListErrors,
    StructErrors,
    ValidationContractError,
    ValidationError,
    ValidationErrors,
    ValidationErrorsKind,
)
from bomcheck.validation.render import errors_to_dict, format_errors, iter_error_paths
from bomcheck.validation.result import (
    ValidationResult,
    merge_enum,
    merge_field,
    merge_list,
    merge_struct,
)
from bomcheck.validation.version import SpecVersion, Validatable

__all__ = [
    "EnumError",
    "FieldErrors",
    "ListErrors",
    "SpecVersion",
    "StructErrors",
    "Validatable",
    "ValidationContext",
    "ValidationContractError",
    "ValidationError",
    "ValidationErrors",
    "ValidationErrorsKind",
    "ValidationResult",
    "errors_to_dict",
    "format_errors",
    "iter_error_paths",
    "merge_enum",
    "merge_field",
    "merge_list",
    "merge_struct",
]
