"""Structured diagnostics with document source position tracking."""

from __future__ import annotations

from pydantic import BaseModel


class SourceSpan(BaseModel):
    """Points to exact location in the document source for error reporting."""

    file: str
    line: int
    column: int


class Diagnostic(BaseModel):
    """One leaf validation error flattened to its document path."""

    path: str
    kind: str
    message: str
    span: SourceSpan | None = None
