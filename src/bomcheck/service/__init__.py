"""Service layer reusable by the CLI and library callers."""

from bomcheck.service.report import ValidationReport, validate_document

__all__ = [
    "ValidationReport",
    "validate_document",
]
