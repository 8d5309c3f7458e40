"""Build typed SBOM documents from loaded plain data."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from bomcheck.models.bom import Bom


class DocumentParseError(Exception):
    """Raised when loaded data does not match the SBOM document model."""

    def __init__(self, message: str, problems: list[str]) -> None:
        super().__init__(message)
        self.message = message
        self.problems = problems


def parse_document(raw: dict[str, Any]) -> Bom:
    """Convert a loaded mapping into a ``Bom``.

    Field type mismatches (a list where a mapping is expected, an unknown
    tool kind ...) are structural problems and raise ``DocumentParseError``;
    rule violations are left to ``Bom.validate``.
    """
    try:
        return Bom.model_validate(raw)
    except PydanticValidationError as exc:
        problems = [
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in exc.errors()
        ]
        raise DocumentParseError(
            f"Document does not match the SBOM model ({len(problems)} problem(s))", problems
        ) from exc
