"""Validation service: runs a document through the engine and builds a report."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from bomcheck.models.bom import Bom
from bomcheck.models.errors import Diagnostic
from bomcheck.parser.loader import SourceMap
from bomcheck.validation import (
    SpecVersion,
    ValidationResult,
    errors_to_dict,
    format_errors,
    iter_error_paths,
)

logger = logging.getLogger("bomcheck.service")


@dataclass
class ValidationReport:
    """Outcome of validating one document, with flattened diagnostics."""

    version: SpecVersion
    result: ValidationResult
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.result.passed()

    def to_text(self) -> str:
        errors = self.result.errors()
        if errors is None:
            return f"Document is valid for spec version {self.version}"
        return format_errors(errors)

    def to_dict(self) -> dict[str, Any]:
        errors = self.result.errors()
        return {
            "version": str(self.version),
            "passed": self.passed,
            "errors": errors_to_dict(errors) if errors is not None else {},
            "diagnostics": [d.model_dump(exclude_none=True) for d in self.diagnostics],
        }


def validate_document(
    bom: Bom, version: SpecVersion, source_map: SourceMap | None = None
) -> ValidationReport:
    """Validate *bom* against *version*; positions come from *source_map* if given."""
    logger.info("Validating document (spec_version=%s)", version)
    result = bom.validate(version)

    diagnostics: list[Diagnostic] = []
    errors = result.errors()
    if errors is not None:
        for path, kind, message in iter_error_paths(errors):
            span = source_map.lookup(path) if source_map is not None else None
            diagnostics.append(Diagnostic(path=path, kind=kind, message=message, span=span))

    if result.passed():
        logger.info("Document passed validation")
    else:
        logger.info("Document failed validation with %d error(s)", len(diagnostics))
        for diagnostic in diagnostics:
            logger.debug("%s: %s", diagnostic.path, diagnostic.message)
    return ValidationReport(version=version, result=result, diagnostics=diagnostics)
