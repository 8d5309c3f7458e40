"""Enumerated SBOM field values."""

from __future__ import annotations

from enum import StrEnum


class ToolKind(StrEnum):
    APPLICATION = "application"
    LIBRARY = "library"
    SERVICE = "service"
    UNKNOWN = "unknown"
