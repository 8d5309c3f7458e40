"""Pydantic document models for bomcheck."""

from bomcheck.models.bom import Bom, Metadata, OrganizationalContact, Tool
from bomcheck.models.enums import ToolKind
from bomcheck.models.errors import Diagnostic, SourceSpan

__all__ = [
    "Bom",
    "Diagnostic",
    "Metadata",
    "OrganizationalContact",
    "SourceSpan",
    "Tool",
    "ToolKind",
]
